'''Definitions of reference positions in particular coordinate systems'''

from .reference import origin, ORIGIN3
