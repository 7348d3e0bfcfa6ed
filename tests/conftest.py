"""Shared fixtures for the document analytics tests."""
import pytest

from doc_analytics.application.services.analytics import TextAnalytics
from doc_analytics.application.services.document_service import DocumentService
from doc_analytics.application.services.document_store import InMemoryDocumentStore
from doc_analytics.application.services.normalizer import TextNormalizer
from doc_analytics.application.services.stop_words import StopWordSource


# Mixed Latin/Cyrillic sample with punctuation and stop words
SAMPLE_TEXT = (
    "Lorem, ipsum odor odor odor a amet, consectetuer adipiscing elit. "
    "Viverra& fermentum neque: tellus euismod gravida duis gravida of mi! "
    "Conubia Conubia Arcu nibh; the leo leo leo leo leo platea enim lacinia? "
    "Принимая во внимание внимание внимание внимание показатели успешности, "
    "дальнейшее развитие различных форм деятельности способствует повышению "
    "качества глубокомысленных рассуждений."
)

SAMPLE_STOP_WORDS = ["a", "of", "the", "во"]


@pytest.fixture
def stop_words():
    return StopWordSource.of(SAMPLE_STOP_WORDS)


@pytest.fixture
def analytics(stop_words):
    return TextAnalytics(normalizer=TextNormalizer(stop_words=stop_words))


@pytest.fixture
def plain_analytics():
    """Analytics without any stop words."""
    return TextAnalytics()


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def service(store, analytics):
    return DocumentService(store=store, analytics=analytics)


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT
