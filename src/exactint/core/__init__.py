"""
Core: лимбовая арифметика и доменная модель BigInt.

math — чистые функции над парами (sign, limbs);
domain — неизменяемый тип значения и перечисления.
"""
