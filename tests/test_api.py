from unittest.mock import patch

import pytest

from ischinese.api import routes
from ischinese.config import settings


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == settings.APP_VERSION


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_detect_traditional(client):
    response = client.post("/detect", json={"text": "你很機車哎"})
    assert response.status_code == 200

    body = response.json()
    assert body["success"] is True
    assert body["length"] == 5

    result = body["result"]
    assert result["is_chinese"] is True
    assert result["is_simplified_chinese"] is True
    assert result["is_traditional_chinese"] is True
    assert result["is_pure_chinese"] is True
    assert result["is_pure_simplified_chinese"] is False
    assert result["is_pure_traditional_chinese"] is True
    assert result["simplified_ratio"] == 0.6
    assert result["chinese_type"] == "traditional"
    assert result["exclusive_traditional_ratio"] == 1.0


def test_detect_mixed_text(client):
    response = client.post("/detect", json={"text": "机车abc"})
    assert response.status_code == 200

    result = response.json()["result"]
    assert result["is_chinese"] is False
    assert result["is_pure_chinese"] is False
    assert result["chinese_ratio"] == 0.4
    assert result["chinese_type"] == "simplified"


def test_detect_empty_text(client):
    response = client.post("/detect", json={"text": ""})
    assert response.status_code == 200

    result = response.json()["result"]
    assert result["is_chinese"] is True
    assert result["is_pure_traditional_chinese"] is True
    assert response.json()["length"] == 0


def test_detect_majority_tie_is_false(client):
    response = client.post("/detect", json={"text": "你好ab"})
    result = response.json()["result"]
    assert result["chinese_ratio"] == 0.5
    assert result["is_chinese"] is False


@pytest.mark.parametrize("text", ["你很機車哎", "机车abc", "機車ab", "机车很好", "你好ab", "hello", ""])
def test_detect_majority_matches_classifier(client, text):
    result = client.post("/detect", json={"text": text}).json()["result"]
    assert result["is_chinese"] is routes.classifier.is_chinese(text)
    assert result["is_simplified_chinese"] is routes.classifier.is_simplified_chinese(text)
    assert result["is_traditional_chinese"] is routes.classifier.is_traditional_chinese(text)


def test_detect_computes_each_ratio_once(client):
    c = routes.classifier
    with patch.object(c, "chinese_ratio", wraps=c.chinese_ratio) as chinese_ratio, \
            patch.object(c, "simplified_ratio", wraps=c.simplified_ratio) as simplified_ratio, \
            patch.object(c, "traditional_ratio", wraps=c.traditional_ratio) as traditional_ratio, \
            patch.object(c, "is_chinese") as is_chinese:
        response = client.post("/detect", json={"text": "你很機車哎"})

    assert response.status_code == 200
    assert chinese_ratio.call_count == 1
    assert simplified_ratio.call_count == 1
    assert traditional_ratio.call_count == 1
    is_chinese.assert_not_called()


def test_detect_threshold(client):
    # 机 车 simplified, 機 traditional
    response = client.post("/detect", json={"text": "机车機", "threshold": 0.5})
    assert response.json()["result"]["chinese_type"] == "simplified"

    response = client.post("/detect", json={"text": "机车機", "threshold": 0.3})
    assert response.json()["result"]["chinese_type"] == "traditional"


def test_detect_rejects_invalid_threshold(client):
    response = client.post("/detect", json={"text": "你好", "threshold": 1.5})
    assert response.status_code == 422


def test_detect_rejects_long_text(client):
    response = client.post("/detect", json={"text": "中" * (settings.MAX_TEXT_LENGTH + 1)})
    assert response.status_code == 422


def test_detect_missing_text(client):
    response = client.post("/detect", json={})
    assert response.status_code == 422


def test_detect_value_error_maps_to_400(client):
    with patch.object(routes.chinese_detector, "detect_chinese_type", side_effect=ValueError("bad threshold")):
        response = client.post("/detect", json={"text": "你好"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "HTTPException"
    assert body["detail"] == "bad threshold"
    assert body["code"] == 400


def test_detect_unexpected_error_maps_to_500(client):
    with patch.object(routes.chinese_detector, "detect_chinese_type", side_effect=KeyError("boom")):
        response = client.post("/detect", json={"text": "你好"})

    assert response.status_code == 500
    assert response.json()["code"] == 500


def test_detect_batch(client):
    texts = ["【厉害的陈友谅】", "《射鵰英雄傳》小說前後一共有三個版本", "hello world"]
    response = client.post("/detect/batch", json={"texts": texts})
    assert response.status_code == 200

    body = response.json()
    assert body["total"] == 3
    simplified, traditional, english = body["results"]
    assert simplified["is_pure_simplified_chinese"] is True
    assert simplified["chinese_type"] == "simplified"
    assert traditional["is_pure_traditional_chinese"] is True
    assert traditional["chinese_type"] == "traditional"
    assert english["is_chinese"] is False


def test_detect_batch_rejects_empty_list(client):
    response = client.post("/detect/batch", json={"texts": []})
    assert response.status_code == 422


def test_detect_batch_rejects_long_text(client):
    texts = ["你好", "中" * (settings.MAX_TEXT_LENGTH + 1)]
    response = client.post("/detect/batch", json={"texts": texts})
    assert response.status_code == 422


def test_get_config(client):
    response = client.get("/config")
    assert response.status_code == 200

    body = response.json()
    assert body["variants_file"] == str(settings.variants_path)
    assert body["dictionary_size"]["simplified"] > 0
    assert body["dictionary_size"]["traditional"] > 0
    assert body["majority_threshold"] == 0.5
    assert body["traditional_ratio_threshold"] == settings.TRADITIONAL_RATIO_THRESHOLD
