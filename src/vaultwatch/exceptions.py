"""Exception hierarchy for vaultwatch."""


class VaultWatchError(Exception):
    """Base class for all vaultwatch errors."""


class ExternalServiceError(VaultWatchError):
    """An upstream service (Solana RPC) returned an error or unusable response."""


class SchemaMismatchError(VaultWatchError):
    """A field classified as a fixed-point decimal did not hold an integer."""

    def __init__(self, field_name: str, value: object) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(f"Decimal field {field_name!r} holds {type(value).__name__}, expected int")


class ListenerNotFoundError(VaultWatchError):
    """No event listener is registered under the given id."""
