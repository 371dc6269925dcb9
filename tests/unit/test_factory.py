"""Tests for resolving specifiers to launchers."""

import uuid

import pytest

from browser_dispatch.dispatch import (
    BrowserLauncherFactory,
    InvalidSpecifierError,
    LauncherConfigurationError,
    LauncherConstructionError,
    LauncherRegistry,
    StaticHost,
    UnsupportedBrowserError,
    add_browser_launcher,
    default_registry,
    get_browser_launcher,
)
from browser_dispatch.launchers import (
    BUILTIN_LAUNCHERS,
    CommandQueue,
    CommandQueueAware,
    DestroyableRuntimeExecutingBrowserLauncher,
    MockBrowserLauncher,
)
from browser_dispatch.launchers.builtin import (
    FirefoxCustomProfileLauncher,
    InternetExplorerCustomProxyLauncher,
)
from browser_dispatch.models import LauncherDescriptor

BUILTIN_TAGS = list(BUILTIN_LAUNCHERS)


class RecordedLauncher:
    """Launcher stand-in remembering how it was built."""

    def __init__(self, *args: object) -> None:
        self.args = args


class QueueAwareRecordedLauncher(RecordedLauncher):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
        self.queues: list[CommandQueue | None] = []

    def set_command_queue(self, queue: CommandQueue | None) -> None:
        self.queues.append(queue)


def recording_descriptor(launcher_class: type = RecordedLauncher) -> LauncherDescriptor:
    return LauncherDescriptor(
        name=launcher_class.__name__,
        create=lambda port, session_id: launcher_class(port, session_id),
        create_with_command=lambda port, session_id, command: launcher_class(
            port, session_id, command
        ),
    )


class CountingHost:
    def __init__(self) -> None:
        self.calls = 0

    def driver_contact_port(self) -> int:
        self.calls += 1
        return 4444


@pytest.fixture
def queue() -> CommandQueue:
    return CommandQueue("s")


@pytest.fixture
def factory() -> BrowserLauncherFactory:
    return BrowserLauncherFactory(LauncherRegistry.with_builtins(), StaticHost(5555))


def test_firefox_without_command(factory: BrowserLauncherFactory, queue: CommandQueue) -> None:
    """Test *firefox builds the two-argument form with the queue attached."""
    launcher = factory.get_browser_launcher("*firefox", "sess1", queue)

    assert isinstance(launcher, FirefoxCustomProfileLauncher)
    assert launcher.port == 5555
    assert launcher.session_id == "sess1"
    assert launcher.browser_launch_location is None
    assert launcher.command_queue is queue


def test_iexplore_with_command(factory: BrowserLauncherFactory, queue: CommandQueue) -> None:
    """Test a specifier argument is passed as the executable path."""
    launcher = factory.get_browser_launcher(
        r"*iexplore C:\Program Files\IE\iexplore.exe", "s", queue
    )

    assert type(launcher) is InternetExplorerCustomProxyLauncher
    assert launcher.browser_launch_location == r"C:\Program Files\IE\iexplore.exe"
    assert launcher.executable == r"C:\Program Files\IE\iexplore.exe"
    assert not isinstance(launcher, CommandQueueAware)


def test_custom_command(factory: BrowserLauncherFactory, queue: CommandQueue) -> None:
    """Test *custom yields the direct-execution launcher without a queue."""
    launcher = factory.get_browser_launcher("*custom /usr/bin/links", "s", queue)

    assert isinstance(launcher, DestroyableRuntimeExecutingBrowserLauncher)
    assert launcher.command == "/usr/bin/links"
    assert launcher.session_id == "s"
    assert not isinstance(launcher, CommandQueueAware)


def test_custom_keeps_surplus_spaces(factory: BrowserLauncherFactory) -> None:
    """Test the custom command keeps whitespace beyond the separator."""
    launcher = factory.get_browser_launcher("*custom   links -g", "s", None)

    assert launcher.command == "  links -g"


def test_bare_custom_rejected(factory: BrowserLauncherFactory) -> None:
    """Test *custom without a command is invalid."""
    with pytest.raises(InvalidSpecifierError):
        factory.get_browser_launcher("*custom", "s", None)


def test_custom_wins_over_registry_state(queue: CommandQueue) -> None:
    """Test *custom resolves even with an empty registry."""
    factory = BrowserLauncherFactory(LauncherRegistry(), StaticHost(1))

    launcher = factory.get_browser_launcher("*custom links", "s", queue)

    assert isinstance(launcher, DestroyableRuntimeExecutingBrowserLauncher)


def test_unknown_browser(factory: BrowserLauncherFactory, queue: CommandQueue) -> None:
    """Test an unknown tag lists every built-in plus *custom."""
    with pytest.raises(UnsupportedBrowserError) as exc_info:
        factory.get_browser_launcher("*mozilla", "s", queue)

    message = str(exc_info.value)
    assert message.startswith("Browser not supported: *mozilla\n")
    assert "Did you forget" not in message
    assert "Supported browsers include:" in message
    for tag in BUILTIN_TAGS:
        assert f"  *{tag}\n" in message
    assert message.endswith("  *custom\n")


def test_missing_star(factory: BrowserLauncherFactory, queue: CommandQueue) -> None:
    """Test a specifier without * gets the hint."""
    with pytest.raises(UnsupportedBrowserError) as exc_info:
        factory.get_browser_launcher("firefox", "s", queue)

    assert "(Did you forget to add a *?)" in str(exc_info.value)


def test_empty_and_none_specifiers(factory: BrowserLauncherFactory) -> None:
    """Test that empty and missing specifiers fail."""
    with pytest.raises(UnsupportedBrowserError):
        factory.get_browser_launcher("", "s", None)
    with pytest.raises(InvalidSpecifierError):
        factory.get_browser_launcher(None, "s", None)


def test_registered_tag_with_command(queue: CommandQueue) -> None:
    """Test a runtime registration resolves with its argument."""
    registry = LauncherRegistry.with_builtins()
    registry.register("lynx", recording_descriptor())
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    launcher = factory.get_browser_launcher("*lynx foo", "s", queue)

    assert isinstance(launcher, RecordedLauncher)
    assert launcher.args == (4444, "s", "foo")


@pytest.mark.parametrize("tag", BUILTIN_TAGS)
def test_every_tag_two_argument_form(tag: str, queue: CommandQueue) -> None:
    """Test each tag builds with (port, session_id) and attaches the queue."""
    registry = LauncherRegistry.with_builtins()
    registry.register(tag, recording_descriptor(QueueAwareRecordedLauncher))
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    launcher = factory.get_browser_launcher(f"*{tag}", "s", queue)

    assert launcher.args == (4444, "s")
    assert launcher.queues == [queue]


@pytest.mark.parametrize("argument", ["foo", " leading", "a b c", "/opt/x y/bin"])
def test_argument_passed_verbatim(argument: str) -> None:
    """Test the argument reaches the three-argument form unchanged."""
    registry = LauncherRegistry()
    registry.register("lynx", recording_descriptor())
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    launcher = factory.get_browser_launcher(f"*lynx {argument}", "s", None)

    assert launcher.args == (4444, "s", argument)


def test_queue_not_attached_when_unaware(queue: CommandQueue) -> None:
    """Test launchers without set_command_queue are left alone."""
    registry = LauncherRegistry({"lynx": recording_descriptor()})
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    launcher = factory.get_browser_launcher("*lynx", "s", queue)

    assert not hasattr(launcher, "queues")


def test_last_registration_wins(queue: CommandQueue) -> None:
    """Test the latest descriptor for a tag is the one used."""
    registry = LauncherRegistry()
    registry.register("lynx", MockBrowserLauncher)
    registry.register("lynx", recording_descriptor())
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    assert isinstance(factory.get_browser_launcher("*lynx", "s", queue), RecordedLauncher)


def test_port_read_once_per_instantiation(queue: CommandQueue) -> None:
    """Test the host port is consulted for every launcher built."""
    host = CountingHost()
    factory = BrowserLauncherFactory(LauncherRegistry.with_builtins(), host)

    factory.get_browser_launcher("*mock", "a", queue)
    factory.get_browser_launcher("*mock", "b", queue)

    assert host.calls == 2


def test_missing_two_argument_factory() -> None:
    """Test a descriptor without the two-argument form fails on *tag."""
    registry = LauncherRegistry(
        {"lynx": LauncherDescriptor(name="Lynx", create_with_command=RecordedLauncher)}
    )
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    with pytest.raises(LauncherConfigurationError):
        factory.get_browser_launcher("*lynx", "s", None)
    assert factory.get_browser_launcher("*lynx /bin/lynx", "s", None).args == (
        4444,
        "s",
        "/bin/lynx",
    )


def test_missing_three_argument_factory() -> None:
    """Test a descriptor without the three-argument form fails on *tag arg."""
    registry = LauncherRegistry({"lynx": LauncherDescriptor(name="Lynx", create=RecordedLauncher)})
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    with pytest.raises(LauncherConfigurationError):
        factory.get_browser_launcher("*lynx /bin/lynx", "s", None)


def test_constructor_failure_is_wrapped() -> None:
    """Test non-runtime constructor errors are wrapped with their cause."""
    cause = OSError("no such binary")

    def create(port: int, session_id: str) -> None:
        raise cause

    registry = LauncherRegistry({"lynx": LauncherDescriptor(name="Lynx", create=create)})
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    with pytest.raises(LauncherConstructionError) as exc_info:
        factory.get_browser_launcher("*lynx", "s", None)

    assert exc_info.value.__cause__ is cause


def test_runtime_failure_propagates_unchanged() -> None:
    """Test runtime errors from a constructor are not wrapped."""
    error = RuntimeError("boom")

    def create(port: int, session_id: str) -> None:
        raise error

    registry = LauncherRegistry({"lynx": LauncherDescriptor(name="Lynx", create=create)})
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    with pytest.raises(RuntimeError) as exc_info:
        factory.get_browser_launcher("*lynx", "s", None)

    assert exc_info.value is error


def test_process_wide_shim(queue: CommandQueue) -> None:
    """Test registering on and resolving through the global registry."""
    tag = f"shim{uuid.uuid4().hex}"

    add_browser_launcher(tag, MockBrowserLauncher)
    launcher = get_browser_launcher(f"*{tag} /opt/shim", "s", queue)

    assert tag in default_registry
    assert isinstance(launcher, MockBrowserLauncher)
    assert launcher.browser_launch_location == "/opt/shim"
    assert launcher.command_queue is queue


@pytest.mark.parametrize("browser", ["*custom ", "*custom    ", "*custom \t"])
def test_blank_custom_command_rejected(factory: BrowserLauncherFactory, browser: str) -> None:
    """Test *custom followed only by whitespace is invalid."""
    with pytest.raises(InvalidSpecifierError):
        factory.get_browser_launcher(browser, "s", None)


def test_custom_windows_path(factory: BrowserLauncherFactory) -> None:
    """Test backslashes in a custom command are kept."""
    launcher = factory.get_browser_launcher(r"*custom C:\Browsers\links.exe -g", "s", None)

    assert launcher.build_command("http://x") == [r"C:\Browsers\links.exe", "-g", "http://x"]


def test_trailing_newline_not_resolved(factory: BrowserLauncherFactory) -> None:
    """Test a specifier with a trailing newline is not a known browser."""
    with pytest.raises(UnsupportedBrowserError):
        factory.get_browser_launcher("*firefox\n", "s", None)


class FailingQueueLauncher:
    def __init__(self, port: int, session_id: str) -> None:
        self.port = port

    def set_command_queue(self, queue: CommandQueue | None) -> None:
        raise KeyError("queue")


class RuntimeFailingQueueLauncher(FailingQueueLauncher):
    def set_command_queue(self, queue: CommandQueue | None) -> None:
        raise RuntimeError("queue rejected")


def test_queue_hookup_failure_is_wrapped(queue: CommandQueue) -> None:
    """Test a failing set_command_queue is wrapped like a constructor failure."""
    registry = LauncherRegistry({"lynx": FailingQueueLauncher})
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    with pytest.raises(LauncherConstructionError) as exc_info:
        factory.get_browser_launcher("*lynx", "s", queue)

    assert isinstance(exc_info.value.__cause__, KeyError)


def test_queue_hookup_runtime_failure_propagates(queue: CommandQueue) -> None:
    """Test a RuntimeError from set_command_queue is not wrapped."""
    registry = LauncherRegistry({"lynx": RuntimeFailingQueueLauncher})
    factory = BrowserLauncherFactory(registry, StaticHost(4444))

    with pytest.raises(RuntimeError, match="queue rejected") as exc_info:
        factory.get_browser_launcher("*lynx", "s", queue)

    assert not isinstance(exc_info.value, LauncherConstructionError)
