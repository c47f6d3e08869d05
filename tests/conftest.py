import pytest
import importlib
import numpy.random
from scalarset import continue_element_checking


@pytest.fixture(autouse=True)
def skip_by_missing_module(request):
    marker = request.node.get_closest_marker("skipif_module_is_missing")
    if marker:
        to_import = marker.args[0]
        try:
            importlib.import_module(to_import)
        except ImportError:
            pytest.skip('skipped because module {} is missing'.format(to_import))


def pytest_runtest_setup(item):
    """ Hook function which is called before every test """
    continue_element_checking()

    # Fix the seed so the randomised property tests are reproducible
    numpy.random.seed(21)
