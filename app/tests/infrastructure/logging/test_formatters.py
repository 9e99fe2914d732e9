from infrastructure.logging.formatters import mask_sensitive_data, truncate_large_values


def test_mask_sensitive_data_masks_matching_keys():
    processor = mask_sensitive_data()
    event = processor(
        None,
        "info",
        {
            "event": "x",
            "webhook_secret": "abc",
            "Authorization": "Bearer abc",
            "email": "a@x.com",
        },
    )
    assert event["webhook_secret"] == "***REDACTED***"
    assert event["Authorization"] == "***REDACTED***"
    assert event["email"] == "a@x.com"


def test_mask_sensitive_data_keeps_none_values():
    processor = mask_sensitive_data()
    assert processor(None, "info", {"token": None}) == {"token": None}


def test_mask_sensitive_data_additional_patterns():
    processor = mask_sensitive_data(mask_value="x", additional_patterns=frozenset({"email"}))
    assert processor(None, "info", {"email": "a@x.com"}) == {"email": "x"}


def test_truncate_large_values():
    processor = truncate_large_values(max_length=5)
    event = processor(None, "info", {"body": "abcdefgh", "short": "abc", "n": 123456})
    assert event["body"] == "abcde...[truncated, 8 chars total]"
    assert event["short"] == "abc"
    assert event["n"] == 123456
