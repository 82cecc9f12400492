import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from symbolic_math import Expression, Constant, symbols, LogLevel, configure_logging
from symbolic_math.logging_system import log_info


def main():
  configure_logging(LogLevel.MODERATE)

  pi = Constant(3.14159265358979323846)

  # declare symbols
  x, y, z = symbols("x y z")

  # build a symbolic expression
  f = Expression(2.0 * x + (y - z) * pi)

  # evaluate the expression
  result = f.evaluate(x.bind(4.0), y.bind(2.0), z.bind(1.0))
  expected = 2.0 * 4.0 + (2.0 - 1.0) * 3.14159265358979323846
  assert result.value == expected, "result does not match expected value"

  log_info(f"f = {f.render(x.bind('x'), y.bind('y'), z.bind('z'), pi.bind('pi'))}")
  log_info(f"f(4, 2, 1) = {result.value}")

  # a missing binding is reported, not raised
  partial = f.evaluate(x.bind(4.0), y.bind(2.0))
  log_info(f"f(4, 2, ?) -> ok={partial.ok}: {partial.error}")

  # the same tree over a batch of samples
  X = np.array([[4.0, 2.0, 1.0], [0.0, 1.0, 1.0], [1.0, 3.0, 0.0]])
  log_info(f"batch: {f.evaluate_array(X, (x, y, z))}")


if __name__ == "__main__":
  main()
