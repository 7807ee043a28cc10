import pytest

from rfidgate.relays import HIGH, LOW, PinDriver, PinMode, RelayController


@pytest.fixture
def driver():
    return PinDriver()


@pytest.fixture
def relays(driver):
    controller = RelayController(driver)
    controller.begin()
    return controller


def _levels_for(driver, pin):
    return [level for p, level in driver.history if p == pin]


def test_relay_initial_state(relays, driver):
    for pin in (9, 10, 20, 21):
        assert driver.modes[pin] == PinMode.OUTPUT
        assert driver.levels[pin] == HIGH
    assert [relays.relay_state(i) for i in range(4)] == [False] * 4


def test_set_single_relay(relays, driver):
    relays.set_relay(0, True)
    assert relays.relay_state(0) is True
    assert relays.relay_state(1) is False
    assert driver.levels[9] == LOW

    relays.set_relay(0, False)
    assert relays.relay_state(0) is False
    assert driver.levels[9] == HIGH


def test_set_all_relays(relays, driver):
    relays.set_all_relays(True)
    assert [relays.relay_state(i) for i in range(4)] == [True] * 4
    assert [driver.levels[p] for p in (9, 10, 20, 21)] == [LOW] * 4

    relays.set_all_relays(False)
    assert [relays.relay_state(i) for i in range(4)] == [False] * 4
    assert [driver.levels[p] for p in (9, 10, 20, 21)] == [HIGH] * 4


def test_invalid_relay_number(relays, driver):
    assert relays.relay_state(4) is False
    before = list(driver.history)
    relays.set_relay(4, True)
    assert relays.relay_state(4) is False
    assert driver.history == before


def test_relay_state_transitions(relays, driver):
    driver.history.clear()
    relays.set_relay(0, False)
    relays.set_relay(0, True)
    relays.set_relay(0, False)
    assert _levels_for(driver, 9) == [HIGH, LOW, HIGH]


def test_rapid_relay_switching(relays, driver):
    driver.history.clear()
    for _ in range(5):
        relays.set_relay(0, True)
        relays.set_relay(0, False)
    assert len(_levels_for(driver, 9)) == 10


def test_sequential_relay_operations(relays, driver):
    driver.history.clear()
    for index in range(4):
        relays.set_relay(index, True)
    assert [relays.relay_state(i) for i in range(4)] == [True] * 4
    assert driver.history == [(9, LOW), (10, LOW), (20, LOW), (21, LOW)]


def test_begin_writes_each_pin_off_once(driver):
    RelayController(driver).begin()
    assert driver.history == [(9, HIGH), (10, HIGH), (20, HIGH), (21, HIGH)]


def test_custom_pins():
    driver = PinDriver()
    controller = RelayController(driver, relay_pins=(2, 3))
    controller.begin()
    controller.set_relay(1, True)
    assert len(controller) == 2
    assert driver.levels == {2: HIGH, 3: LOW}
    assert controller.relay_state(2) is False