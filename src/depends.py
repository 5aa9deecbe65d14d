from fastapi import Request

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notification_gateway import NotificationGateway


def get_config(request: Request):
    """Application config handed to create_app()"""
    return request.app.state.config


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notification_gateway(request: Request) -> NotificationGateway:
    return request.app.state.notifier
