"""Shared fixtures: canned Yahoo Finance payloads and a recording hook."""
import copy

import pytest

from helpers import (CHART_PAYLOAD, COMPANY_PROFILE_PAYLOAD,
                     INDEX_PROFILE_PAYLOAD, PRICE_PAYLOAD, RecordingHook)


@pytest.fixture
def chart_payload():
    return copy.deepcopy(CHART_PAYLOAD)


@pytest.fixture
def price_payload():
    return copy.deepcopy(PRICE_PAYLOAD)


@pytest.fixture
def company_profile_payload():
    return copy.deepcopy(COMPANY_PROFILE_PAYLOAD)


@pytest.fixture
def index_profile_payload():
    return copy.deepcopy(INDEX_PROFILE_PAYLOAD)


@pytest.fixture
def hook():
    return RecordingHook()
