import pytest
from fastapi.testclient import TestClient

from ischinese.core import Classifier, load_dictionary
from ischinese.main import app


SAMPLE_VARIANTS = """\
# sample variants file
U+6A5F\tkSimplifiedVariant\tU+673A
U+673A\tkTraditionalVariant\tU+6A5F
U+8ECA\tkSimplifiedVariant\tU+8F66
U+8F66\tkTraditionalVariant\tU+8ECA
U+540E\tkTraditionalVariant\tU+540E U+5F8C
U+5F8C\tkSimplifiedVariant\tU+540E
U+4E0E\tkSemanticVariant\tU+8207<kMatthews
U+9F8D\tkSimplifiedVariant
U+XYZ\tkSimplifiedVariant\tU+9F99 U+123456789 U+9F9C
"""


@pytest.fixture
def variants_file(tmp_path):
    path = tmp_path / "Unihan_Variants.txt"
    path.write_text(SAMPLE_VARIANTS, encoding="utf-8")
    return path


@pytest.fixture
def sample_classifier(variants_file):
    return Classifier(load_dictionary(variants_file), log_failed_chars=False)


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c
