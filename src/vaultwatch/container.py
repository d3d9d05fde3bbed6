from dependency_injector import containers, providers

from vaultwatch.config import Settings
from vaultwatch.infra.http.rate_limited_client import RateLimitedClient
from vaultwatch.infra.solana.rpc_client import SolanaRPCClient
from vaultwatch.listener.dispatcher import EventDispatcher
from vaultwatch.listener.poller import SolanaEventPoller
from vaultwatch.normalizer import EventNormalizer, build_vault_field_policy
from vaultwatch.publisher import EventPublisher, LoggingRecordSink


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    # Supplied by the caller: payload bytes -> (event name, decoded tree).
    event_decoder = providers.Dependency()

    field_policy = providers.Singleton(build_vault_field_policy)

    normalizer = providers.Singleton(
        EventNormalizer,
        field_policy=field_policy,
        overflow_policy=settings.provided.overflow_policy,
        strict=settings.provided.strict_schema,
    )

    record_sink = providers.Singleton(LoggingRecordSink)

    publisher = providers.Singleton(
        EventPublisher,
        normalizer=normalizer,
        sink=record_sink,
        source_id=settings.provided.effective_source_id,
    )

    dispatcher = providers.Singleton(EventDispatcher)

    http_client = providers.Singleton(
        RateLimitedClient,
        rate_per_second=settings.provided.rpc_rate_per_second,
        timeout=settings.provided.rpc_timeout,
    )

    rpc = providers.Singleton(
        SolanaRPCClient,
        rpc_url=settings.provided.solana_rpc_url,
        http_client=http_client,
        commitment=settings.provided.commitment,
    )

    poller = providers.Singleton(
        SolanaEventPoller,
        rpc=rpc,
        program_id=settings.provided.program_id,
        decoder=event_decoder,
        dispatcher=dispatcher,
        batch_limit=settings.provided.signature_batch_limit,
        poll_interval=settings.provided.poll_interval_seconds,
    )
