"""Pytest configuration and fixtures."""

import copy
from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from oed_org.services.dictionary import OxfordClient

BASE_URL = "https://od-api.test/api/v1"

SAMPLE_RESPONSE: dict[str, Any] = {
    "metadata": {"provider": "Oxford University Press"},
    "results": [
        {
            "id": "ace",
            "language": "en",
            "type": "headword",
            "word": "ace",
            "lexicalEntries": [
                {
                    "language": "en",
                    "lexicalCategory": "Noun",
                    "text": "ace",
                    "pronunciations": [
                        {
                            "audioFile": "http://audio.test/ace_gb_1.mp3",
                            "dialects": ["British English"],
                            "phoneticNotation": "IPA",
                            "phoneticSpelling": "eɪs",
                        }
                    ],
                    "entries": [
                        {
                            "etymologies": ["Middle English: via Old French from Latin as 'unity'"],
                            "grammaticalFeatures": [{"text": "Singular", "type": "Number"}],
                            "homographNumber": "100",
                            "senses": [
                                {
                                    "definitions": ["a playing card with a single spot on it"],
                                    "domains": ["Cards"],
                                    "examples": [
                                        {"text": "the ace of diamonds"},
                                        {
                                            "registers": ["figurative"],
                                            "text": "life had started dealing him aces again",
                                        },
                                    ],
                                    "id": "m_en_gbus0005680.006",
                                    "synonyms": [
                                        {"id": "one", "language": "en", "text": "one"},
                                        {"id": "single", "language": "en", "text": "single"},
                                    ],
                                    "subsenses": [
                                        {
                                            "definitions": [
                                                "a person who excels at a particular activity"
                                            ],
                                            "domains": ["Sport"],
                                            "registers": ["informal"],
                                            "examples": [{"text": "a motorcycle ace"}],
                                            "synonyms": [
                                                {"text": "expert"},
                                                {"text": "master"},
                                                {"text": "expert"},
                                            ],
                                            "antonyms": [{"text": "amateur"}],
                                        }
                                    ],
                                }
                            ],
                        }
                    ],
                },
                {
                    "language": "en",
                    "lexicalCategory": "Adjective",
                    "text": "ace",
                    "entries": [
                        {
                            "homographNumber": "200",
                            "senses": [
                                {
                                    "definitions": ["very good"],
                                    "registers": ["informal"],
                                    "regions": ["British"],
                                    "examples": [{"text": "an ace swimmer"}],
                                    "notes": [{"text": "attributive", "type": "grammaticalNote"}],
                                    "crossReferenceMarkers": ["see ace (sense 1)"],
                                }
                            ],
                        }
                    ],
                },
            ],
        }
    ],
}

# Later API versions wrap tags and categories in {"id", "text"} objects
SAMPLE_RESPONSE_V2: dict[str, Any] = {
    "id": "serve",
    "results": [
        {
            "id": "serve",
            "language": "en-gb",
            "lexicalEntries": [
                {
                    "lexicalCategory": {"id": "verb", "text": "Verb"},
                    "text": "serve",
                    "entries": [
                        {
                            "pronunciations": [
                                {
                                    "dialects": ["British English"],
                                    "phoneticNotation": "IPA",
                                    "phoneticSpelling": "səːv",
                                }
                            ],
                            "senses": [
                                {
                                    "shortDefinitions": ["hit ball to begin play"],
                                    "domains": [{"id": "tennis", "text": "Tennis"}],
                                    "regions": [{"id": "british", "text": "British"}],
                                    "crossReferences": [
                                        {"id": "service", "text": "service", "type": "see also"}
                                    ],
                                }
                            ],
                        }
                    ],
                }
            ],
        }
    ],
}


def make_response(
    status_code: int,
    url: str,
    json_data: Any = None,
    content: bytes = b"",
) -> httpx.Response:
    """Build a real httpx response bound to a GET request."""
    request = httpx.Request("GET", url)
    if json_data is not None:
        return httpx.Response(status_code, json=json_data, request=request)
    return httpx.Response(status_code, content=content, request=request)


@pytest.fixture
def sample_response() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_RESPONSE)


@pytest.fixture
def sample_response_v2() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_RESPONSE_V2)


@pytest.fixture
def oxford_client() -> OxfordClient:
    return OxfordClient(
        app_id="test-id",
        app_key="test-key",
        base_url=BASE_URL,
        language="en",
        timeout=5.0,
    )


@pytest.fixture
def mock_http() -> Generator[AsyncMock, None, None]:
    """Patch httpx.AsyncClient and yield the instance used inside ``async with``."""
    with patch("httpx.AsyncClient") as mock_client:
        mock_instance = AsyncMock()
        mock_instance.__aenter__.return_value = mock_instance
        mock_instance.__aexit__.return_value = None
        mock_client.return_value = mock_instance
        yield mock_instance
