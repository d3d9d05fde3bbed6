from vaultwatch.listener.decoder import EventDecoder, load_decoder
from vaultwatch.listener.dispatcher import EventDispatcher, EventHandler
from vaultwatch.listener.log_events import extract_program_data
from vaultwatch.listener.poller import SolanaEventPoller
from vaultwatch.listener.vault_listeners import attach_vault_listeners, detach_listeners

__all__ = [
    "EventDecoder",
    "EventDispatcher",
    "EventHandler",
    "SolanaEventPoller",
    "attach_vault_listeners",
    "detach_listeners",
    "extract_program_data",
    "load_decoder",
]
