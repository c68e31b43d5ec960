import logging

from bmicalculator.model.bmi import BmiCategory, RawInput


def test_initial_state_is_empty(store):
    assert store.raw == RawInput("", "")
    assert store.result is None
    assert store.error == ""


def test_set_fields_last_write_wins(store):
    store.set_height("1")
    store.set_height("17")
    store.set_height("170")
    store.set_weight("70")
    assert store.raw == RawInput(height="170", weight="70")


def test_editing_does_not_touch_outcome(store):
    store.set_height("170")
    store.set_weight("70")
    result = store.calculate()
    store.set_weight("")
    assert store.result is result
    assert store.error == ""


def test_calculate_success_publishes_result(store):
    results, errors = [], []
    store.result_changed.connect(lambda r: results.append(r))
    store.error_changed.connect(lambda e: errors.append(e))

    store.set_height("170")
    store.set_weight("70")
    result = store.calculate()

    assert result is not None
    assert result.display_value == "24.2"
    assert result.category is BmiCategory.NORMAL
    assert store.result is result
    assert store.error == ""
    assert results == [result]
    assert errors == [""]


def test_calculate_failure_publishes_error(store):
    results, errors = [], []
    store.result_changed.connect(lambda r: results.append(r))
    store.error_changed.connect(lambda e: errors.append(e))

    store.set_weight("70")
    assert store.calculate() is None

    assert store.result is None
    assert store.error == "Please enter both height and weight."
    assert errors == ["Please enter both height and weight."]
    assert results == [None]


def test_error_clears_previous_result(store):
    store.set_height("170")
    store.set_weight("70")
    store.calculate()

    store.set_weight("0")
    store.calculate()

    assert store.result is None
    assert store.error == "Weight must be a positive number."


def test_result_clears_previous_error(store):
    store.set_height("-1")
    store.set_weight("70")
    store.calculate()
    assert store.error == "Height must be a positive number."

    store.set_height("180")
    store.set_weight("100")
    result = store.calculate()

    assert store.error == ""
    assert store.result is result
    assert result.display_value == "30.9"
    assert result.category is BmiCategory.OBESE


def test_new_result_replaces_old(store):
    store.set_height("170")
    store.set_weight("70")
    first = store.calculate()
    store.set_height("160")
    store.set_weight("45")
    second = store.calculate()

    assert store.result is second
    assert second != first
    assert second.category is BmiCategory.UNDERWEIGHT


def test_stores_are_independent(store):
    from bmicalculator.app.state import Store

    other = Store()
    store.set_height("170")
    assert other.raw.height == ""


def test_successful_calculation_is_logged(store, caplog):
    store.set_height("170")
    store.set_weight("70")
    with caplog.at_level(logging.DEBUG, logger="bmicalculator"):
        store.calculate()
    assert any("24.2" in r.getMessage() for r in caplog.records)


def test_validation_errors_are_not_logged(store, caplog):
    with caplog.at_level(logging.DEBUG, logger="bmicalculator"):
        store.calculate()
    assert caplog.records == []
