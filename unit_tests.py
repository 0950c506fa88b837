import ipdb, cProfile, pstats

PROFILE_INIT = True
if PROFILE_INIT:
    profiler = cProfile.Profile()
    profiler.enable()
from src.voicings import generate_voicings
from src.guitar import Guitar, standard

# individual test modules:
from src.test import test_util, test_parsing, test_notes, test_frets, test_search
from src.test import test_dominance, test_shapes, test_ranking, test_voicings
from src.test import test_chords, test_tuning, test_guitar, test_display

from src import util
if PROFILE_INIT:

    profiler.disable()
    stats = pstats.Stats(profiler).sort_stats('cumtime')
    stats.print_stats(20)

util.log.verbose = False

PROFILE_EACH = False

modules_to_test = [
                  test_util,
                  test_parsing,
                  test_notes,
                  test_frets,
                  test_search,
                  test_dominance,
                  test_shapes,
                  test_ranking,
                  test_voicings,
                  test_chords,
                  test_tuning,
                  test_guitar,
                  test_display,
                  ]

def module_tests(module):
    """every test function defined in a test module, in definition order"""
    return [func for name, func in vars(module).items() if name.startswith('test_') and callable(func)]

def profile(func):
    def wrapper():
        if PROFILE_EACH:
            profiler = cProfile.Profile()
            profiler.enable()
            func()
            profiler.disable()
            stats = pstats.Stats(profiler).sort_stats('cumtime')
            stats.print_stats(6)
        else:
            func()
    return wrapper

def run_all_tests():
    for module in modules_to_test:

        @profile
        def module_test():
            print(f'Testing {module.__name__}')
            for test_func in module_tests(module):
                test_func()
            print(f' + {module.__name__} test passed + ')

        module_test()
    print(f'+++ All tests passed +++')

if PROFILE_EACH:
    run_all_tests()
else:
    # profile them all together:
    profiler = cProfile.Profile()
    profiler.enable()

    run_all_tests()

    profiler.disable()
    stats = pstats.Stats(profiler).sort_stats('tottime')
    print('='*20 + '\nPROFILING:\n' + '='*20)
    stats.print_stats(20)
