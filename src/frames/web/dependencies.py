"""Request-scoped services for the frame routers.

Each request gets a fresh command; the process-wide ``ServiceFactory``
comes from ``get_factory`` and can be swapped in tests through
``app.dependency_overrides[get_service_factory]``.
"""

from typing import Annotated

from fastapi import Depends

from frames.application.commands import GenerateFrameCommand
from frames.application.factory import ServiceFactory, get_factory


def get_service_factory() -> ServiceFactory:
    return get_factory()


def get_generate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateFrameCommand:
    return factory.create_generate_command()


ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
GenerateCommandDep = Annotated[GenerateFrameCommand, Depends(get_generate_command)]
