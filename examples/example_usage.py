import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sci_calc import Expression, add, neg, PI, E, LogLevel, configure_logging


def main():
  configure_logging(LogLevel.VERBOSE)

  # Built with constructors
  tree = add(PI, 1, neg(PI), E, neg(E), 2)
  print(f"Tree:       {tree}")
  print(f"Evaluated:  {tree.evaluate()!r}")
  simplified = tree.simplify()
  print(f"Simplified: {simplified}")
  print(f"Evaluated:  {simplified.evaluate()!r}")

  # Built with operators
  fluent = PI + 1 - PI
  print(f"\nOperators:  {fluent!r} -> {fluent.simplify()!r}")

  # Parsed from text
  parsed = Expression.from_string("e + 3/4 - e")
  print(f"\nParsed:     {parsed}")
  print(f"LaTeX:      {parsed.latex()}")
  print(f"Value:      {float(parsed)}")


if __name__ == "__main__":
  main()
