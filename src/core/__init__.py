"""
Core — точная рациональная арифметика.

Модуль содержит тип Rational, его грамматику, целочисленные примитивы и
иерархию ошибок. Ядро не выполняет ввод-вывод и не пишет логи.
"""
