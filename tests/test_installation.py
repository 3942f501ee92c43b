import pytest

import installation
from installation import InstallStatus, InstallView


@pytest.mark.parametrize(
    "flag,expected",
    [
        (None, InstallStatus.PENDING),
        ("", InstallStatus.PENDING),
        ("installing", InstallStatus.INSTALLING),
        ("INSTALLING", InstallStatus.INSTALLING),
        ("installed", InstallStatus.SUCCEEDED),
        ("succeeded", InstallStatus.SUCCEEDED),
        ("bogus", InstallStatus.PENDING),
    ],
)
def test_parse_status(flag, expected):
    assert installation.parse_status(flag) is expected


def test_advance_is_a_fixed_sequence():
    status = InstallStatus.PENDING
    seen = []
    for _ in range(4):
        status = installation.advance(status)
        seen.append(status)
    assert seen == [
        InstallStatus.INSTALLING,
        InstallStatus.SUCCEEDED,
        InstallStatus.SUCCEEDED,
        InstallStatus.SUCCEEDED,
    ]


def test_install_view_is_deterministic():
    first = InstallView.for_status(InstallStatus.INSTALLING, delay=3)
    second = InstallView.for_status(InstallStatus.INSTALLING, delay=3)
    assert first == second
    assert first.show_progress
    assert first.refresh_after == 3
    assert first.next_status is InstallStatus.SUCCEEDED


def test_install_view_completed():
    view = InstallView.for_status(InstallStatus.SUCCEEDED)
    assert view.title == "Installation Complete!"
    assert not view.show_progress
    assert view.refresh_after is None


def test_install_url():
    assert installation.install_url("neon-mcp") == "/servers/neon-mcp/install"
    assert (
        installation.install_url("neon-mcp", InstallStatus.INSTALLING)
        == "/servers/neon-mcp/install?status=installing"
    )
    assert installation.install_url("a/b", InstallStatus.SUCCEEDED) == "/servers/a%2Fb/install?status=installed"


def test_start_install_redirects_to_installing(caplog):
    caplog.set_level("INFO")
    target = installation.start_install("weather-mcp")
    assert target == "/servers/weather-mcp/install?status=installing"
    assert any("weather-mcp" in message for message in caplog.messages)


@pytest.mark.parametrize("server_id", [None, "", "   "])
def test_start_install_requires_id(server_id):
    with pytest.raises(ValueError, match="Server ID is required"):
        installation.start_install(server_id)
