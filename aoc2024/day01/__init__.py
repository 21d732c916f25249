from .ref import ParseError, parse_line, parse_lines, similarity_score, solve, solve_part2, to_int, total_distance

__all__ = [
    "ParseError",
    "parse_line",
    "parse_lines",
    "similarity_score",
    "solve",
    "solve_part2",
    "to_int",
    "total_distance",
]
