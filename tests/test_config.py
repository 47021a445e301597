import asyncio
import logging
import threading
import warnings

import numpy as np
import pytest

import velitherm
from velitherm import config
from velitherm._utils import as_float


def test_defaults():
    assert velitherm.get_options() == {'invalid': 'warn'}


def test_get_options_is_a_copy():
    velitherm.get_options()['invalid'] = 'raise'
    assert velitherm.get_options()['invalid'] == 'warn'


class TestInvalidInput:
    """Non-physical input propagates as NaN/inf"""

    def test_negative_pressure(self):
        with pytest.warns(RuntimeWarning):
            altitude = velitherm.altitude_from_pressure(-1.0)
        assert np.isnan(altitude)

    def test_above_standard_atmosphere(self):
        with pytest.warns(RuntimeWarning):
            pressure = velitherm.pressure_from_standard_altitude(50000)
        assert np.isnan(pressure)

    def test_zero_denominator(self):
        with pytest.warns(RuntimeWarning):
            w = velitherm.mixing_ratio(1000)
        assert np.isinf(w)

    def test_zero_pressure(self):
        with pytest.warns(RuntimeWarning):
            altitude = velitherm.altitude_from_standard_pressure(900, 0)
        assert altitude == -np.inf

    def test_array_keeps_valid_elements(self):
        with pytest.warns(RuntimeWarning):
            altitude = velitherm.altitude_from_pressure(np.array([900.0, -1.0]))
        assert np.isfinite(altitude[0])
        assert np.isnan(altitude[1])


class TestSetOptions:

    def test_raise(self):
        with velitherm.set_options(invalid='raise'):
            with pytest.raises(FloatingPointError):
                velitherm.altitude_from_pressure(0.0)
        assert velitherm.get_options()['invalid'] == 'warn'

    def test_ignore(self):
        with velitherm.set_options(invalid='ignore'):
            with warnings.catch_warnings():
                warnings.simplefilter('error')
                assert np.isnan(velitherm.dew_point(-10))

    def test_current_context(self):
        velitherm.set_options(invalid='ignore')
        assert velitherm.get_options()['invalid'] == 'ignore'

    def test_nested_formula_follows_option(self):
        # relative_humidity calls water_vapor_saturation_pressure internally
        with velitherm.set_options(invalid='raise'):
            with pytest.raises(FloatingPointError):
                velitherm.relative_humidity(5, 0.0, -237.3)

    def test_restored_after_error(self):
        with pytest.raises(FloatingPointError):
            with velitherm.set_options(invalid='raise'):
                velitherm.lcl(1e308, -1e308)
        assert velitherm.get_options()['invalid'] == 'warn'

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown option"):
            velitherm.set_options(strict=True)

    def test_invalid_value(self):
        with pytest.raises(ValueError, match="Expected one of"):
            velitherm.set_options(invalid='print')
        assert velitherm.get_options()['invalid'] == 'warn'

    def test_logs_changes(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='velitherm.config'):
            velitherm.set_options(invalid='ignore')
        assert "invalid" in caplog.text

    def test_errstate(self):
        with velitherm.set_options(invalid='raise'):
            assert config.errstate() == {'divide': 'raise', 'invalid': 'raise', 'over': 'raise'}


class TestAsFloat:

    def test_python_scalars(self):
        assert isinstance(as_float(1), np.float64)
        assert isinstance(as_float(1.5), np.float64)

    def test_passthrough(self):
        values = np.arange(3.0)
        assert as_float(values) is values
        value = np.float32(2.0)
        assert as_float(value) is value

    def test_list(self):
        values = as_float([1, 2.5])
        assert isinstance(values, np.ndarray)
        assert values.dtype == np.float64


class TestConcurrency:
    """Options set in one thread or task do not leak into others"""

    def test_scoped_option_stays_in_its_thread(self):
        entered = threading.Event()
        done = threading.Event()
        results = {}

        def strict():
            with velitherm.set_options(invalid='raise'):
                entered.set()
                done.wait(timeout=10)

        def lenient():
            entered.wait(timeout=10)
            try:
                with warnings.catch_warnings():
                    warnings.simplefilter('ignore')
                    results['altitude'] = velitherm.altitude_from_pressure(-1.0)
            except FloatingPointError as err:
                results['error'] = err
            finally:
                done.set()

        threads = [threading.Thread(target=strict), threading.Thread(target=lenient)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert 'error' not in results
        assert np.isnan(results['altitude'])

    def test_thread_does_not_change_caller(self):
        thread = threading.Thread(target=velitherm.set_options, kwargs={'invalid': 'raise'})
        thread.start()
        thread.join()
        assert velitherm.get_options()['invalid'] == 'warn'

    def test_asyncio_tasks(self):
        async def strict():
            with velitherm.set_options(invalid='raise'):
                await asyncio.sleep(0.01)
                return velitherm.get_options()['invalid']

        async def lenient():
            await asyncio.sleep(0)
            return velitherm.get_options()['invalid']

        async def main():
            return await asyncio.gather(strict(), lenient())

        assert asyncio.run(main()) == ['raise', 'warn']
