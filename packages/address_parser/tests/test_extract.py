from packages.address_parser.extract import guess_id_number, guess_name, guess_phone_number, name_candidates

LASTNAMES = ["张", "李", "王", "赵", "欧阳"]


def test_guess_phone_number_next_to_chinese_text() -> None:
    assert guess_phone_number("小吃A张三13144381379") == "13144381379"


def test_guess_phone_number_ignores_longer_digit_runs() -> None:
    assert guess_phone_number("订单9813144381379123") == ""
    assert guess_phone_number("110101192007207351") == ""


def test_guess_phone_number_takes_first_match() -> None:
    assert guess_phone_number("13144381379 13800138000") == "13144381379"
    assert guess_phone_number("无号码") == ""


def test_guess_id_number_lowercases_checksum() -> None:
    assert guess_id_number("身份证 11010119200720735X") == "11010119200720735x"
    assert guess_id_number("110101192007207351") == "110101192007207351"
    assert guess_id_number("1101011920072073") == ""


def test_name_candidates_order_from_ends_to_middle() -> None:
    assert name_candidates("甲甲 乙乙 丙丙 丁丁 戊戊") == ["甲甲", "戊戊", "乙乙", "丁丁", "丙丙"]
    assert name_candidates("甲甲1乙乙a丙丙（丁丁）") == ["甲甲", "丁丁", "乙乙", "丙丙"]
    assert name_candidates("") == []


def test_guess_name_prefers_outer_candidates() -> None:
    assert guess_name("李四 王五 赵六", LASTNAMES) == "李四"


def test_guess_name_rejects_long_tokens() -> None:
    assert guess_name("欧阳大大大 深圳", LASTNAMES) == ""
    assert guess_name("欧阳娜娜 深圳", LASTNAMES) == "欧阳娜娜"


def test_guess_name_rejects_single_character_and_unknown_surnames() -> None:
    assert guess_name("张 宝安区", LASTNAMES) == ""
    assert guess_name("钱多多", LASTNAMES) == ""
    assert guess_name("张三", []) == ""
