"""Shape combinatorics for stereochemistry: idealized coordination shapes, their rotation groups, rotationally-unique stereopermutations, and minimal-distortion shape transitions"""

from ._version import __version__

TOOLKIT_NAME : str = 'chemsym (Chemical Symmetry Toolkit)'
