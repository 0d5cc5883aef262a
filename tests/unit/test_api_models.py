"""Tests for imagestudio.api.models — Pydantic request/response schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from imagestudio.api.models import GeneratedImage, GenerateRequest, GenerateResponse


class TestGenerateRequest:
    """Test GenerateRequest defaults and count clamping."""

    def test_defaults(self):
        req = GenerateRequest(prompt="a fox")
        assert req.count == 1
        assert req.aspect_ratio == "1:1"

    def test_prompt_defaults_to_empty(self):
        assert GenerateRequest().prompt == ""

    @pytest.mark.parametrize(
        "raw,expected",
        [(0, 1), (-2, 1), (3, 3), (9, 4), ("2", 2), ("lots", 1), (None, 1)],
    )
    def test_count_clamped(self, raw, expected):
        assert GenerateRequest(prompt="x", count=raw).count == expected

    def test_huge_json_count_clamped_to_max(self):
        payload = '{"prompt": "x", "count": 1' + "0" * 400 + "}"
        assert GenerateRequest.model_validate_json(payload).count == 4

    def test_aspect_ratio_not_validated_by_schema(self):
        req = GenerateRequest(prompt="x", aspect_ratio="4:3")
        assert req.aspect_ratio == "4:3"


class TestGenerateResponse:
    """Test GenerateResponse serialisation."""

    def test_round_trip_dump(self):
        image = GeneratedImage(
            index=0,
            data_url="data:image/png;base64,AAAA",
            mime_type="image/png",
            aspect_ratio="1:1",
            filename="fox_1.png",
        )
        resp = GenerateResponse(prompt="fox", count=1, aspect_ratio="1:1", images=[image])

        data = resp.model_dump()
        assert data["success"] is True
        assert data["images"][0]["filename"] == "fox_1.png"

    def test_images_required(self):
        with pytest.raises(ValidationError):
            GenerateResponse(prompt="fox", count=1, aspect_ratio="1:1")
