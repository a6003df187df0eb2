from packages.address_parser.normalize import remove_ignore_words, remove_punctuation, trim_ignores
from packages.address_parser.reference_data import load_reference_data


def test_trim_ignores_removes_labels_and_punctuation() -> None:
    value = trim_ignores("收件人：张三, 电话：13144381379", ["收件人", "电话"])
    assert value == "张三 13144381379"


def test_trim_ignores_is_idempotent() -> None:
    reference = load_reference_data()
    raw = "深圳市宝安区新安街道128号沙县小吃, 电话：13144381379，收件人：张三 身份证号: 110101192007207351"
    once = trim_ignores(raw, reference.ignore_words, reference.punctuation)
    assert once == "深圳市宝安区新安街道128号沙县小吃 13144381379张三  110101192007207351"
    assert trim_ignores(once, reference.ignore_words, reference.punctuation) == once


def test_remove_ignore_words_prefers_longest_word() -> None:
    value = remove_ignore_words("身份证号码110101192007207351", ["身份证", "身份证号码"])
    assert value == "110101192007207351"


def test_remove_ignore_words_keeps_text_without_matches() -> None:
    assert remove_ignore_words("宝安区新安街道", ["电话"]) == "宝安区新安街道"
    assert remove_ignore_words("", ["电话"]) == ""


def test_remove_punctuation_keeps_spacing() -> None:
    assert remove_punctuation("沙县小吃, 张三。") == "沙县小吃 张三"
