"""Pytest configuration file"""

import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tests.settings")

import django
import pytest

from tests.data import base_forest, small_forest


def pytest_report_header(config):
    return "Django: " + django.get_version()


def pytest_configure(config):
    django.setup()


@pytest.fixture
def forest():
    return base_forest()


@pytest.fixture
def small():
    return small_forest()
