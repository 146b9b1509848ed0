# tests/test_rules.py
import pytest

from app.models import Amount, LineItem, PurchaseRecord
from app.rules.ruleset import (
    alphanumeric_count,
    rule_afternoon_purchase,
    rule_description_length,
    rule_item_pairs,
    rule_odd_purchase_day,
    rule_quarter_multiple_total,
    rule_retailer_alphanumeric,
    rule_round_dollar_total,
)

def _rec(**kw) -> PurchaseRecord:
    base = dict(retailer="Shop", total="1.00", purchase_date="2022-01-02",
                purchase_time="10:00", items=(LineItem("Item", "1.00"),))
    base.update(kw)
    return PurchaseRecord(**base)

def test_alphanumeric_ignores_spaces_and_punctuation():
    assert alphanumeric_count("M&M Corner Market") == 14
    assert rule_retailer_alphanumeric(_rec(retailer="M&M Corner Market")) == (True, 14, "retailer_alphanumeric")

def test_alphanumeric_skips_non_ascii():
    assert alphanumeric_count("Café 24") == 5
    assert alphanumeric_count("ÄÖÜ") == 0

def test_round_dollar_total():
    assert rule_round_dollar_total(_rec(total="9.00"))[0]
    assert rule_round_dollar_total(_rec(total="9"))[0]
    assert not rule_round_dollar_total(_rec(total="9.01"))[0]
    assert rule_round_dollar_total(_rec(total="9.00"))[1] == 50

def test_quarter_multiple_total():
    assert rule_quarter_multiple_total(_rec(total="0.75"))[0]
    assert rule_quarter_multiple_total(_rec(total="9.00"))[0]
    assert not rule_quarter_multiple_total(_rec(total="35.35"))[0]
    assert not rule_quarter_multiple_total(_rec(total="1.005"))[0]

def test_total_rules_use_parsed_amount_when_present():
    rec = _rec(total="garbage", total_amount=Amount(25, 1))
    assert rule_quarter_multiple_total(rec)[0]
    assert not rule_round_dollar_total(rec)[0]

def test_unparsable_total_contributes_nothing():
    assert not rule_round_dollar_total(_rec(total="abc"))[0]
    assert not rule_quarter_multiple_total(_rec(total="abc"))[0]

def test_item_pairs():
    items = tuple(LineItem("x", "1.00") for _ in range(5))
    assert rule_item_pairs(_rec(items=items)) == (True, 10, "item_pairs")
    assert rule_item_pairs(_rec(items=items[:1]))[0] is False

def test_description_length_rounds_up():
    rec = _rec(items=(LineItem("abc", "6.49"),))
    assert rule_description_length(rec)[1] == 2

def test_description_length_trims_whitespace():
    rec = _rec(items=(LineItem("   Klarbrunn 12-PK 12 FL OZ  ", "12.00"),))
    assert rule_description_length(rec)[1] == 3

def test_description_length_has_no_float_drift():
    # 15 * 0.2 in binary floating point is 3.0000000000000004
    rec = _rec(items=(LineItem("abc", "15.00"),))
    assert rule_description_length(rec)[1] == 3

def test_blank_description_is_not_a_multiple_of_three():
    rec = _rec(items=(LineItem("   ", "10.00"), LineItem("", "10.00")))
    assert rule_description_length(rec) == (False, 0, "description_length")

def test_odd_purchase_day():
    assert rule_odd_purchase_day(_rec(purchase_date="2022-01-01"))[0]
    assert not rule_odd_purchase_day(_rec(purchase_date="2022-01-02"))[0]

def test_malformed_date_contributes_nothing():
    for bad in ["2022-01", "2022-01-xx", "", "20220101"]:
        assert rule_odd_purchase_day(_rec(purchase_date=bad))[0] is False

def test_afternoon_window_boundaries():
    assert rule_afternoon_purchase(_rec(purchase_time="14:00"))[0]
    assert rule_afternoon_purchase(_rec(purchase_time="15:59"))[0]
    assert not rule_afternoon_purchase(_rec(purchase_time="13:59"))[0]
    assert not rule_afternoon_purchase(_rec(purchase_time="16:00"))[0]

def test_unparsable_time_contributes_nothing():
    for bad in ["", "2pm", ":30"]:
        assert rule_afternoon_purchase(_rec(purchase_time=bad))[0] is False

def test_total_rules_handle_long_totals():
    assert rule_round_dollar_total(_rec(total="1" * 29 + ".01"))[0] is False
    assert rule_quarter_multiple_total(_rec(total="1" * 29 + ".01"))[0] is False
    assert rule_round_dollar_total(_rec(total="1" * 40 + ".00"))[0]
    assert rule_quarter_multiple_total(_rec(total="1" * 40 + ".75"))[0]

def test_description_length_handles_long_prices():
    rec = _rec(items=(LineItem("abc", "9" * 40),))
    assert rule_description_length(rec)[1] == 2 * 10 ** 39

def test_description_length_sub_cent_price():
    # 1.005 * 0.2 = 0.201
    rec = _rec(items=(LineItem("abc", "1.005"),))
    assert rule_description_length(rec)[1] == 1

def test_oversized_day_and_hour_fields():
    assert rule_odd_purchase_day(_rec(purchase_date="2022-01-" + "1" * 5000))[0] is False
    assert rule_afternoon_purchase(_rec(purchase_time="1" * 5000 + ":00"))[0] is False

@pytest.mark.parametrize("date", ["2022-01-01\n", "2022-01-١", "2022-01- 1"])
def test_day_must_be_ascii_digits(date):
    assert rule_odd_purchase_day(_rec(purchase_date=date))[0] is False

@pytest.mark.parametrize("time", ["14\n:00", "١٤:00", " 14:00"])
def test_hour_must_be_ascii_digits(time):
    assert rule_afternoon_purchase(_rec(purchase_time=time))[0] is False
