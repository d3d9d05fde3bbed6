from enum import Enum


class VaultEvent(str, Enum):
    """Events emitted by the Voltr vault program. Values match the IDL event names."""

    ADD_ADAPTOR = "addAdaptorEvent"
    CANCEL_REQUEST_WITHDRAW_VAULT = "cancelRequestWithdrawVaultEvent"
    CLOSE_STRATEGY = "closeStrategyEvent"
    DEPOSIT_STRATEGY = "depositStrategyEvent"
    DEPOSIT_VAULT = "depositVaultEvent"
    DIRECT_WITHDRAW_STRATEGY = "directWithdrawStrategyEvent"
    HARVEST_FEE = "harvestFeeEvent"
    INIT_PROTOCOL = "initProtocolEvent"
    INITIALIZE_DIRECT_WITHDRAW_STRATEGY = "initializeDirectWithdrawStrategyEvent"
    INITIALIZE_STRATEGY = "initializeStrategyEvent"
    INITIALIZE_VAULT = "initializeVaultEvent"
    REMOVE_ADAPTOR = "removeAdaptorEvent"
    REQUEST_WITHDRAW_VAULT = "requestWithdrawVaultEvent"
    UPDATE_PROTOCOL = "updateProtocolEvent"
    UPDATE_VAULT = "updateVaultEvent"
    WITHDRAW_STRATEGY = "withdrawStrategyEvent"
    WITHDRAW_VAULT = "withdrawVaultEvent"
