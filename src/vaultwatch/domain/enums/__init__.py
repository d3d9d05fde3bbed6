from vaultwatch.domain.enums.field_kind import FieldKind
from vaultwatch.domain.enums.overflow_policy import OverflowPolicy
from vaultwatch.domain.enums.vault_event import VaultEvent

__all__ = [
    "FieldKind",
    "OverflowPolicy",
    "VaultEvent",
]
