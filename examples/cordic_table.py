import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from sci_calc.numeric import ITERATIONS, cordic


def radians(degrees):
  return degrees * (np.pi / 180.0)


def main():
  print(f"ITERATIONS = {ITERATIONS}")
  print()
  print("theta      sin(x)     diff. sine     cos(x)   diff. cosine ")
  for theta in range(-90, 91, 15):
    cos, sin = cordic(radians(theta))
    print(f"{theta:+05.1f}°  {sin:+.8f} ({sin - np.sin(radians(theta)):+.8f}) "
          f"{cos:+.8f} ({cos - np.cos(radians(theta)):+.8f})")


if __name__ == "__main__":
  main()
