"""Start-up: load the configuration and attach the log sinks it asks for."""

from __future__ import annotations

from pathlib import Path

from .config import ConfigError, ConfigStore
from .logger import get_log_sink
from .sinks import DebugPrintSink, FileSink, LogSink, NetworkSink, SinkChain

DEFAULT_LOG_PATH = Path("mallow.log")


def setup_logging(
    store: ConfigStore,
    log_path: str | Path = DEFAULT_LOG_PATH,
    chain: SinkChain | None = None,
) -> list[LogSink]:
    """Attach the sinks the loaded settings enable and return them in order.

    Nothing is attached when the store has no settings or logging is off.
    A network sink that failed to connect is attached only when it may
    reconnect later.
    """
    target = chain if chain is not None else get_log_sink()
    settings = store.settings
    if settings is None or not settings.enable_logger:
        return []

    added: list[LogSink] = []

    file_sink = FileSink(log_path)
    target.add(file_sink)
    added.append(file_sink)

    if settings.logger_ip:
        network_sink = NetworkSink(
            settings.logger_ip,
            settings.logger_port,
            settings.try_reconnect_logger,
        )
        if network_sink.is_successfully_connected() or settings.try_reconnect_logger:
            target.add(network_sink)
            added.append(network_sink)
        else:
            network_sink.close()
            target.log_line("Failed to connect to the network sink")

    if store.is_emu():
        debug_sink = DebugPrintSink()
        target.add(debug_sink)
        added.append(debug_sink)

    return added


def initialize(
    store: ConfigStore,
    log_path: str | Path = DEFAULT_LOG_PATH,
    chain: SinkChain | None = None,
) -> list[LogSink]:
    """Load the configuration, falling back to and saving the default, then set up logging."""
    target = chain if chain is not None else get_log_sink()

    try:
        loaded = store.load(retry=True)
    except ConfigError:
        loaded = False

    if not loaded:
        store.use_default()
        try:
            store.save()
        except ConfigError:
            target.log_line("Failed to save default config")

    store.read_to_struct()

    added = setup_logging(store, log_path, target)
    target.log_line("Logging and config set up!")
    return added