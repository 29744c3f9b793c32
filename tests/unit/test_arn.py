import pytest

from arnparse import Arn, ArnParseError, ArnParseErrorKind, format_arn, parse_arn


def _assert_fields(arn, partition, service, region, account_id, resource):
    assert arn.partition == partition
    assert arn.service == service
    assert arn.region == region
    assert arn.account_id == account_id
    assert arn.resource == resource


def test_parse_resource_type_with_slash():
    arn_str = "arn:aws:ec2:us-east-1:123456789012:vpc/vpc-fd580e98"
    arn = Arn.parse(arn_str)

    _assert_fields(arn, "aws", "ec2", "us-east-1", "123456789012", "vpc/vpc-fd580e98")
    assert str(arn) == arn_str


def test_parse_no_resource_type():
    arn_str = "arn:aws:codecommit:us-east-1:123456789012:MyDemoRepo"
    arn = Arn.parse(arn_str)

    _assert_fields(arn, "aws", "codecommit", "us-east-1", "123456789012", "MyDemoRepo")
    assert str(arn) == arn_str


def test_parse_resource_keeps_every_colon_after_account():
    arn_str = "arn:aws:logs:us-east-1:123456789012:log-group:my-log-group*:log-stream:my-log-stream*"
    arn = Arn.parse(arn_str)

    assert arn.resource == "log-group:my-log-group*:log-stream:my-log-stream*"
    assert str(arn) == arn_str


def test_parse_resource_type_with_colon():
    arn = Arn.parse("arn:aws:cloudwatch:us-east-1:123456789012:alarm:MyAlarmName")
    assert arn.resource == "alarm:MyAlarmName"


def test_parse_resource_with_multiple_slashes():
    arn_str = (
        "arn:aws:macie:us-east-1:123456789012:trigger/example61b3df36bff1dafaf1aa304b0ef1a975"
        "/alert/example8780e9ca227f98dae37665c3fd22b585"
    )
    arn = Arn.parse(arn_str)

    assert arn.service == "macie"
    assert arn.resource == (
        "trigger/example61b3df36bff1dafaf1aa304b0ef1a975/alert/example8780e9ca227f98dae37665c3fd22b585"
    )
    assert str(arn) == arn_str


def test_parse_no_region_no_account_id():
    arn_str = "arn:aws:s3:::my_corporate_bucket"
    arn = Arn.parse(arn_str)

    _assert_fields(arn, "aws", "s3", None, None, "my_corporate_bucket")
    assert str(arn) == arn_str


def test_parse_resource_with_spaces_and_wildcard_is_untouched():
    arn_str = "arn:aws:artifact:::report-package/Certifications and Attestations/SOC/*"
    arn = Arn.parse(arn_str)

    assert arn.region is None
    assert arn.account_id is None
    assert arn.resource == "report-package/Certifications and Attestations/SOC/*"
    assert str(arn) == arn_str


def test_parse_region_only():
    arn_str = "arn:aws:apigateway:us-east-1::a123456789012bc3de45678901f23a45:/test/mydemoresource/*"
    arn = Arn.parse(arn_str)

    _assert_fields(
        arn,
        "aws",
        "apigateway",
        "us-east-1",
        None,
        "a123456789012bc3de45678901f23a45:/test/mydemoresource/*",
    )
    assert str(arn) == arn_str


def test_parse_wildcard_region():
    arn = Arn.parse("arn:aws:sns:*:123456789012:my_corporate_topic")
    assert arn.region == "*"
    assert arn.resource == "my_corporate_topic"


def test_parse_non_default_partition():
    arn = Arn.parse("arn:aws-cn:s3:::my_bucket/Development/*")
    assert arn.partition == "aws-cn"
    assert arn.resource == "my_bucket/Development/*"


def test_reparse_is_identical():
    for arn_str in (
        "arn:aws:execute-api:us-east-1:123456789012:8kjmp19d1h/*/*/*/*",
        "arn:aws:s3:::my_corporate_bucket/exampleobject.png",
        "arn:aws:sns:us-east-1:123456789012:my_corporate_topic:02034b43-fefa-4e07-a5eb-3be56f8c54ce",
    ):
        arn = Arn.parse(arn_str)
        assert Arn.parse(str(arn)) == arn


def test_empty_string_and_none_format_the_same():
    with_none = Arn("aws", "s3", None, None, "bucket")
    with_empty = Arn("aws", "s3", "", "", "bucket")

    assert str(with_none) == str(with_empty) == "arn:aws:s3:::bucket"
    # o parse sempre devolve None para segmentos vazios
    assert Arn.parse(str(with_empty)) == with_none


def test_arn_is_frozen_and_hashable():
    arn = Arn.parse("arn:aws:s3:::bucket")
    with pytest.raises(AttributeError):
        arn.resource = "other"  # type: ignore[misc]
    assert {arn, Arn.parse("arn:aws:s3:::bucket")} == {arn}


def test_to_dict_keeps_absent_fields_as_none():
    assert Arn.parse("arn:aws:s3:::bucket").to_dict() == {
        "arn": "arn:aws:s3:::bucket",
        "partition": "aws",
        "service": "s3",
        "region": None,
        "account_id": None,
        "resource": "bucket",
    }


def test_module_helpers():
    arn = parse_arn("arn:aws:iam::123456789012:role/Admin")
    assert arn.account_id == "123456789012"
    assert format_arn(arn) == "arn:aws:iam::123456789012:role/Admin"


@pytest.mark.parametrize(
    "arn_str, kind",
    [
        ("", ArnParseErrorKind.MISSING_PREFIX),
        ("something:aws:s3:::my_corporate_bucket", ArnParseErrorKind.MISSING_PREFIX),
        ("ARN:aws:s3:::my_corporate_bucket", ArnParseErrorKind.MISSING_PREFIX),
        ("arn", ArnParseErrorKind.NOT_ENOUGH_ELEMENTS),
        ("arn:", ArnParseErrorKind.MISSING_PARTITION),
        ("arn:aws:a4b:us-east-1:123456789012", ArnParseErrorKind.NOT_ENOUGH_ELEMENTS),
        ("arn::ec2:us-east-1:123456789012:vpc/vpc-fd580e98", ArnParseErrorKind.MISSING_PARTITION),
        ("arn:aws::us-east-1:123456789012:vpc/vpc-fd580e98", ArnParseErrorKind.MISSING_SERVICE),
        ("arn:aws:ec2:us-east-1:123456789012:", ArnParseErrorKind.MISSING_RESOURCE),
        ("arn:aws:s3:::", ArnParseErrorKind.MISSING_RESOURCE),
    ],
)
def test_parse_errors(arn_str, kind):
    with pytest.raises(ArnParseError) as exc_info:
        Arn.parse(arn_str)

    assert exc_info.value.kind is kind
    assert str(exc_info.value) == kind.value


def test_parse_error_is_value_error_and_compares_by_kind():
    with pytest.raises(ValueError):
        Arn.parse("arn:aws")

    assert ArnParseError(ArnParseErrorKind.MISSING_SERVICE) == ArnParseError(ArnParseErrorKind.MISSING_SERVICE)
    assert ArnParseError(ArnParseErrorKind.MISSING_SERVICE) != ArnParseError(ArnParseErrorKind.MISSING_RESOURCE)


def test_parse_rejects_non_string():
    with pytest.raises(TypeError):
        Arn.parse(None)  # type: ignore[arg-type]
