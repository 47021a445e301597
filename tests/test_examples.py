import runpy
from pathlib import Path

import pytest

EXAMPLES = Path(__file__).resolve().parents[1] / 'examples'


@pytest.mark.parametrize("script", ['flight_instrument.py', 'rising_air.py'])
def test_example_runs(script, capsys):
    runpy.run_path(str(EXAMPLES / script), run_name='__main__')
    assert capsys.readouterr().out


def test_rising_air_verdicts(capsys):
    runpy.run_path(str(EXAMPLES / 'rising_air.py'), run_name='__main__')
    out = capsys.readouterr().out
    assert 'No, it did not form a cloud' in out
    # 25°C parcel cools dry-adiabatically to ~20.2°C at 500 m, still warmer than 20°C aloft
    assert 'The air parcel will continue to rise' in out
