"""Pytest config"""

import logging

import pytest

from tests import utils


def pytest_addoption(parser):
    """Pytest hook that adds command line options"""
    parser.addoption(
        "--disable-logging",
        action="store_true",
        default=False,
        help="Disable all logging during test run",
    )


def pytest_configure(config):
    """Pytest hook that runs after command line options have been parsed"""
    if config.getoption("--disable-logging"):
        logging.disable(logging.CRITICAL)


@pytest.fixture(autouse=True)
def _reset_host_storage():
    """Start every test with empty host articles and messages."""
    utils.ARTICLES.clear()
    utils.MESSAGE_STORE.messages.clear()
    yield
    utils.ARTICLES.clear()
    utils.MESSAGE_STORE.messages.clear()


@pytest.fixture()
def provider():
    """A provider prefixing translations with the target code"""
    return utils.FakeProvider()


@pytest.fixture()
def articles():
    """Three articles registered under the ``article`` model"""
    utils.ARTICLES.extend(
        [
            utils.FakeRecord(1, {"en": {"title": "Hello", "content": "<p>Body</p>"}}),
            utils.FakeRecord(
                2,
                {
                    "en": {"title": "World", "content": "<p>More</p>"},
                    "de": {"title": "Welt"},
                },
            ),
            utils.FakeRecord(3, {"en": {"title": "", "content": "   "}}),
        ]
    )
    return utils.ARTICLES
