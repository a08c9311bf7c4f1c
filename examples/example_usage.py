"""Example: drive the claim workflow through the service layer (no Flask)."""

import importlib

from config import get_settings_module

from claim_system.auth.context import RequestContext
from claim_system.claims.model import NewClaim
from claim_system.container import build_container
from claim_system.core.enums import Role


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, upload_root=settings.UPLOAD_FOLDER)

    lecturer = RequestContext(role=Role.LECTURER, display_name="Demo Lecturer")
    claim_id = container.claim_service.submit(
        lecturer,
        NewClaim(
            lecturer_name="John Doe",
            lecturer_email="john.doe@example.com",
            hours_worked="20",
            hourly_rate="250",
            notes="October teaching hours",
        ),
    )

    coordinator = RequestContext(role=Role.COORDINATOR, display_name="Demo Coordinator")
    container.claim_service.approve(coordinator, claim_id)
    claim = container.claim_service.track(coordinator, claim_id)
    print(claim.claim_id, claim.status.value, claim.total_amount)


if __name__ == "__main__":
    main()
