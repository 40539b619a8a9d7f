"""Puzzle input for Day 1, one rotation per line."""

INPUT: str = """
L68
L30
R48
L5
R60
L55
L1
L99
R14
L82
"""
