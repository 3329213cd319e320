"""Helpers that are not specific to first-order logic: exceptions printed
without traceback, logging formatters and timers, and a tracing decorator.
"""
