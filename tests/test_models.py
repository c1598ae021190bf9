"""Tests for payload models and the success/failure union."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.models import (
    ApiFailure,
    ApiSuccess,
    License,
    LinkResponse,
    Member,
    MembersPayload,
    Summary,
    parse_api_response,
)

from .conftest import make_license, make_member


class TestLicense:

    def test_irating_defaults_to_zero_when_absent(self):
        license_ = License.model_validate(make_license(irating=None))
        assert license_.irating == 0

    def test_irating_null_is_zero(self):
        data = make_license()
        data["irating"] = None
        assert License.model_validate(data).irating == 0

    def test_unknown_keys_ignored(self):
        data = make_license()
        data["mpr_num_races"] = 4
        assert License.model_validate(data).group_name == "Class B"


class TestMember:

    def test_is_immutable(self):
        member = Member.model_validate(make_member(1))
        with pytest.raises(ValidationError):
            member.display_name = "other"

    def test_licenses_required(self):
        payload = {"members": [{"cust_id": 1, "display_name": "A"}]}
        assert isinstance(parse_api_response(MembersPayload, payload), ApiFailure)

    @pytest.mark.parametrize("cust_id", [-1, 2**32])
    def test_cust_id_is_u32(self, cust_id):
        with pytest.raises(ValidationError):
            Member.model_validate(make_member(cust_id))

    def test_cust_id_upper_bound_accepted(self):
        assert Member.model_validate(make_member(2**32 - 1)).cust_id == 2**32 - 1

    def test_licenses_keep_order(self):
        member = Member.model_validate(
            make_member(1, licenses=[make_license("oval"), make_license("road"), make_license("dirt_road")])
        )
        assert [l.category for l in member.licenses] == ["oval", "road", "dirt_road"]


class TestLinkResponse:

    def test_keeps_presigned_query_verbatim(self):
        url = "https://bucket.example.com/data/x.json?X-Amz-Signature=ab%2Bcd&X-Amz-Expires=900"
        assert LinkResponse.model_validate({"link": url}).link == url

    @pytest.mark.parametrize("link", ["", "/relative/path", "ftp://host/file", "not a url"])
    def test_rejects_non_absolute_links(self, link):
        with pytest.raises(ValidationError):
            LinkResponse.model_validate({"link": link})

    def test_missing_link(self):
        with pytest.raises(ValidationError):
            LinkResponse.model_validate({"data": {}})


class TestParseApiResponse:

    def test_success_first(self):
        result = parse_api_response(MembersPayload, {"members": [make_member(7)]})
        assert isinstance(result, ApiSuccess)
        assert result.data.members[0].cust_id == 7

    def test_unmatched_shape_is_failure_with_error_kept(self):
        payload = {"error": "Unauthorized", "message": "expired"}
        result = parse_api_response(MembersPayload, payload)
        assert isinstance(result, ApiFailure)
        assert result.payload == payload
        assert isinstance(result.error, ValidationError)

    def test_non_object_payload_is_failure(self):
        assert isinstance(parse_api_response(MembersPayload, None), ApiFailure)
        assert isinstance(parse_api_response(MembersPayload, [1, 2]), ApiFailure)


class TestSummary:

    def test_dumps_report_field_names(self):
        summary = Summary(id="1", name="A", irating="1500", license="Class B", sr="3.21")
        assert summary.model_dump(by_alias=True) == {
            "id": "1",
            "name": "A",
            "iRating": "1500",
            "license": "Class B",
            "SR": "3.21",
        }
        assert summary.as_row() == ["1", "A", "1500", "Class B", "3.21"]
