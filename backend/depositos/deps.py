# depositos/deps.py
from fastapi import Request

from depositos.services.notifications import NotificationQueue
from depositos.services.repository import DepositoRepository
from depositos.services.view_model import DepositoListViewModel


def get_repository(request: Request) -> DepositoRepository:
    return request.app.state.repository


def get_list_view_model(request: Request) -> DepositoListViewModel:
    return request.app.state.list_view


def get_notification_queue(request: Request) -> NotificationQueue:
    return request.app.state.notifications
