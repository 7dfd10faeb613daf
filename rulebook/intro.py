import math
from typing import Sequence


def max_of(a: float, b: float) -> float:
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    if n % 3 == 0 and n % 5 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_average(numbers: Sequence[float]) -> float:
    if not numbers:
        return math.nan
    return sum(numbers) / len(numbers)


def factorial(n: int) -> int:
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result
