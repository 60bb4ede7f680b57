from __future__ import annotations

import pytest

from attachview.features.preview.browser import ClientBrowser, version_matches


@pytest.mark.parametrize(
    ("version", "condition", "expected"),
    [
        ("13.1.2", "<14", True),
        ("14", "<14", False),
        ("14.0.1", "<14", False),
        ("14", "<=14", True),
        ("15.2", ">14", True),
        ("14", ">=14.0", True),
        ("13.1", "=13.1.0", True),
        ("13.1", "13.1", True),
        ("13.1.5", "~13.1", True),
        ("13.2", "~13.1", False),
        ("Version/12.0 Mobile", "<14", True),
        (None, "<14", False),
        ("unknown", "<14", False),
        ("13", "less than 14", False),
    ],
)
def test_version_matches(version: str | None, condition: str, expected: bool) -> None:
    assert version_matches(version, condition) is expected


def test_satisfies_only_applies_condition_for_matching_browser() -> None:
    safari = ClientBrowser(name="Safari", version="13.1", platform="macOS")
    chrome = ClientBrowser(name="Chrome", version="90", platform="Windows")

    assert safari.satisfies({"safari": "<14"})
    assert not safari.satisfies({"safari": ">=14"})
    assert not chrome.satisfies({"safari": "<14"})
    assert not ClientBrowser().satisfies({"safari": "<14"})


def test_is_platform_matches_platform_or_browser_name() -> None:
    browser = ClientBrowser(name="Safari", version="17.0", platform="iOS")

    assert browser.is_platform("iOS")
    assert browser.is_platform("ios")
    assert browser.is_platform("safari")
    assert not browser.is_platform("Android")
    assert not browser.is_platform("")
    assert not ClientBrowser().is_platform("iOS")
