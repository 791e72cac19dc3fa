"""
Interactive demonstration of repetition data validation.

Three demos show type-checking alone (whole number, fractional number and
the configured element); three more combine it with range-checking.
Each demo prompts, reads a validated value, echoes it back and returns it.
"""
import logging
from typing import Any, Optional

from .element import Element
from .parsers import display
from .readers import (
    Emit,
    echo,
    read_element,
    read_element_in_range,
    read_float,
    read_float_in_range,
    read_int,
    read_int_in_range,
)
from .sources import InputSource

logger = logging.getLogger(__name__)

INT_LOW, INT_HIGH = 6, 37
FLOAT_LOW, FLOAT_HIGH = 5.5, 42.8

INSTRUCTIONS = (
    "\n"
    "Demonstration of repetition type-checking\n"
    "data validation and repetition range checking\n"
    "data validation.\n"
    "\n"
    "For the prompts that follow, try typing inputs\n"
    "outside of the given range, or even using a\n"
    "wrong data type.\n"
    "\n"
)


def instruct(emit: Optional[Emit] = None) -> None:
    """Tell the user how to use the demonstration."""
    (emit or echo)(INSTRUCTIONS)


def _confirm(value: Any, emit: Emit) -> Any:
    emit(f"You entered {display(value)}\n\n")
    return value


def demo_int_type_checking(source: InputSource, emit: Optional[Emit] = None, **options) -> int:
    emit = emit or echo
    value = read_int(source, prompt="Enter a whole number: ", emit=emit, **options)
    return _confirm(value, emit)


def demo_float_type_checking(source: InputSource, emit: Optional[Emit] = None, **options) -> float:
    emit = emit or echo
    value = read_float(source, prompt="Enter a fractional number: ", emit=emit, **options)
    return _confirm(value, emit)


def demo_element_type_checking(source: InputSource, element: Element,
                               emit: Optional[Emit] = None, **options) -> Any:
    emit = emit or echo
    value = read_element(source, element, prompt=f"Enter an element ({element.name}): ",
                         emit=emit, **options)
    return _confirm(value, emit)


def demo_int_type_and_range_checking(source: InputSource, emit: Optional[Emit] = None, **options) -> int:
    emit = emit or echo
    value = read_int_in_range(
        source, INT_LOW, INT_HIGH,
        prompt=f"Enter a whole number between {INT_LOW} and {INT_HIGH}: ",
        emit=emit, **options,
    )
    return _confirm(value, emit)


def demo_float_type_and_range_checking(source: InputSource, emit: Optional[Emit] = None, **options) -> float:
    emit = emit or echo
    value = read_float_in_range(
        source, FLOAT_LOW, FLOAT_HIGH,
        prompt=f"Enter a fractional number between {display(FLOAT_LOW)} and {display(FLOAT_HIGH)}: ",
        emit=emit, **options,
    )
    return _confirm(value, emit)


def demo_element_type_and_range_checking(source: InputSource, element: Element,
                                         emit: Optional[Emit] = None, **options) -> Any:
    emit = emit or echo
    value = read_element_in_range(
        source, element,
        prompt=(f"Enter an element ({element.name}) between "
                f"{display(element.low)} and {display(element.high)}: "),
        emit=emit, **options,
    )
    return _confirm(value, emit)


def run_demo(source: InputSource, element: Element, emit: Optional[Emit] = None, **options) -> list:
    """
    Run all six demos in order.

    Returns:
        The accepted values, in demo order
    """
    emit = emit or echo
    instruct(emit)
    logger.info(f"Running demo with element '{element.name}' ({element.kind.value})")
    return [
        demo_int_type_checking(source, emit, **options),
        demo_float_type_checking(source, emit, **options),
        demo_element_type_checking(source, element, emit, **options),
        demo_int_type_and_range_checking(source, emit, **options),
        demo_float_type_and_range_checking(source, emit, **options),
        demo_element_type_and_range_checking(source, element, emit, **options),
    ]
