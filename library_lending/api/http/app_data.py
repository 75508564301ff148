from dataclasses import dataclass

from library_lending.core.services import CascadeBus, DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    cascade_bus: CascadeBus
