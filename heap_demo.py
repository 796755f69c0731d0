import sys
from collections import Counter
from enum import Enum

import numpy as np

from heap_ import (HeapError, HeapKind, delete_heap, heap_extract, heap_insert,
                   kind_to_label, new_heap)

HEAP_KINDS = [HeapKind.MIN, HeapKind.MAX]


class ScenarioResult(Enum):
    PASSED = "PASSED"
    FAILED = "FAILED"
    SYSERR = "SYSERR"
    UNEXPECTED = "UNEXPE"


class DemoParams:
    def __init__(self):
        self.n_random_values = 10000
        self.seed = None
        self.random_min = 0
        self.random_max = 2**31 - 1


class ScenarioFailure(Exception):
    """A scenario observed a value other than the expected one."""


def read_input(input_filename, params):
    """Reads key=value lines from input_filename into params."""
    with open(input_filename, "r") as input_file:
        for line in input_file:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parameter, value = line.split("=")
            parameter = parameter.strip()
            value = value.strip()

            if parameter == "n_random_values":
                params.n_random_values = int(value)
            elif parameter == "seed":
                params.seed = int(value)
            elif parameter == "random_min":
                params.random_min = int(value)
            elif parameter == "random_max":
                params.random_max = int(value)
            else:
                raise ValueError(f"Unknown parameter {parameter}")

    if params.n_random_values < 0:
        raise ValueError("n_random_values must not be negative")
    if params.random_min > params.random_max:
        raise ValueError("random_min must not exceed random_max")


def initialize_random_generator(seed=None):
    return np.random.default_rng(seed)


def extract_expected(heap, expected):
    for expected_value in expected:
        value = heap_extract(heap)
        if value is None:
            raise ScenarioFailure("No item to extract from heap")
        if value != expected_value:
            raise ScenarioFailure(f"Did not extract the expected value. Got {value} exp {expected_value}")


def scenario_single(params, random_generator):
    for kind in HEAP_KINDS:
        heap = new_heap(kind)
        heap_insert(heap, 0)
        extract_expected(heap, [0])
        delete_heap(heap)


def scenario_four(params, random_generator):
    in_values = {
        HeapKind.MIN: [10, 9, 8, 0],
        HeapKind.MAX: [0, 8, 9, 10],
    }
    out_values = {
        HeapKind.MIN: [0, 8, 9, 10],
        HeapKind.MAX: [10, 9, 8, 0],
    }
    for kind in HEAP_KINDS:
        heap = new_heap(kind)
        for value in in_values[kind]:
            heap_insert(heap, value)
        extract_expected(heap, out_values[kind])
        delete_heap(heap)


def scenario_random(params, random_generator):
    for kind in HEAP_KINDS:
        heap = new_heap(kind)
        values = random_generator.integers(params.random_min, params.random_max,
                                           size=params.n_random_values, endpoint=True)
        for value in values:
            heap_insert(heap, value)

        extracted = []
        for _ in range(params.n_random_values):
            value = heap_extract(heap)
            if value is None:
                raise ScenarioFailure("No item to extract from heap")
            if extracted and kind is HeapKind.MIN and value < extracted[-1]:
                raise ScenarioFailure(f"Got larg val: {value}, exp a smal val: {extracted[-1]}")
            if extracted and kind is HeapKind.MAX and value > extracted[-1]:
                raise ScenarioFailure(f"Got smal val: {value}, exp a larg val: {extracted[-1]}")
            extracted.append(value)

        if Counter(extracted) != Counter(values.tolist()):
            raise ScenarioFailure("Extracted values differ from the inserted ones")
        delete_heap(heap)


def scenario_labels(params, random_generator):
    expected = {HeapKind.MIN: "min_heap", HeapKind.MAX: "max_heap"}
    for kind in HEAP_KINDS:
        label = kind_to_label(kind)
        if label != expected[kind]:
            raise ScenarioFailure(f"Unexpected label {label} for {kind}")


SCENARIOS = [
    ("Create, insert 1, extract and delete heap, both types", scenario_single),
    ("Create, insert 4, extract and delete heap, both types", scenario_four),
    ("Create and delete, insert random values at once, extract all, both types", scenario_random),
    ("Testing kind_to_label", scenario_labels),
]


def run_scenario(scenario, params, random_generator):
    try:
        scenario(params, random_generator)
    except ScenarioFailure as e:
        print(f"ERROR {scenario.__name__}: {e}", file=sys.stderr)
        return ScenarioResult.FAILED
    except HeapError as e:
        print(f"ERROR {scenario.__name__}: {type(e).__name__}: {e}", file=sys.stderr)
        return ScenarioResult.SYSERR
    except Exception as e:
        print(f"ERROR {scenario.__name__}: unexpected {type(e).__name__}: {e}", file=sys.stderr)
        return ScenarioResult.UNEXPECTED
    return ScenarioResult.PASSED


def run_scenarios(params, random_generator, scenarios=None):
    if scenarios is None:
        scenarios = SCENARIOS
    return [(description, run_scenario(scenario, params, random_generator))
            for description, scenario in scenarios]


def main(argv):
    params = DemoParams()
    if len(argv) > 2:
        print("ERROR heap_demo.py: usage: heap_demo.py [input_file]", file=sys.stderr)
        return -1
    if len(argv) == 2:
        try:
            read_input(argv[1], params)
        except FileNotFoundError:
            print(f"ERROR: cannot open file <{argv[1]}>.", file=sys.stderr)
            return -1
        except ValueError as e:
            print(f"ERROR: invalid input file <{argv[1]}>: {e}", file=sys.stderr)
            return -1

    random_generator = initialize_random_generator(params.seed)
    results = run_scenarios(params, random_generator)
    for description, result in results:
        print(f"{result.value}: {description}")

    return 0 if all(result is ScenarioResult.PASSED for _, result in results) else 1


def cli():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
