"""Permission resolution for authenticated accounts."""

from dataclasses import dataclass, field

from src.louvores.core.logging import get_logger
from src.louvores.core.permissions import Capability, PermissionPolicy
from src.louvores.core.security import Account
from src.louvores.models import AccessRecord, Role
from src.louvores.repositories import AccessRecordRepository

logger = get_logger(__name__)

NOT_PROVISIONED = "not_provisioned"
DEACTIVATED = "deactivated"


@dataclass
class PermissionResolution:
    """Outcome of resolving an account's permissions.

    ``error`` is set (and every capability false) when the account has no
    usable access record.
    """

    record: AccessRecord | None
    flags: dict[str, bool] = field(default_factory=dict)
    error: str | None = None

    @property
    def is_super_admin(self) -> bool:
        return self.flags.get("is_super_admin", False)

    def has(self, capability: Capability) -> bool:
        return self.error is None and self.flags.get(capability.value, False)


def _no_capabilities() -> dict[str, bool]:
    flags = {capability.value: False for capability in Capability}
    flags["is_super_admin"] = False
    return flags


def synthetic_super_admin_record(account: Account) -> AccessRecord:
    """Unsaved access record for a super-admin with no row in the store."""
    email = account.email or ""
    local_part = email.split("@", 1)[0]
    return AccessRecord(
        id=account.id,
        person_id=None,
        email=email,
        name=account.name or local_part or "Admin",
        role=Role.ADMIN.value,
        active=True,
    )


class PermissionService:
    def __init__(self, access_repo: AccessRecordRepository, policy: PermissionPolicy):
        self.access_repo = access_repo
        self.policy = policy

    async def resolve(self, account: Account) -> PermissionResolution:
        """Resolve capabilities for an account.

        The super-admin allow-list is checked before anything stored: a
        super-admin gets every capability even without a record or with an
        inactive one.
        """
        super_admin = self.policy.is_super_admin(account.email)

        record = await self.access_repo.get_by_id(account.id)
        if record is None and account.email:
            record = await self.access_repo.get_by_email(account.email)

        if record is None:
            if not super_admin:
                logger.info("Account has no access record", account_id=str(account.id))
                return PermissionResolution(
                    record=None, flags=_no_capabilities(), error=NOT_PROVISIONED
                )
            record = synthetic_super_admin_record(account)

        if not record.active and not super_admin:
            logger.info("Account access deactivated", account_id=str(account.id))
            return PermissionResolution(record=record, flags=_no_capabilities(), error=DEACTIVATED)

        email = account.email or record.email
        return PermissionResolution(record=record, flags=self.policy.capabilities(record.role, email))
