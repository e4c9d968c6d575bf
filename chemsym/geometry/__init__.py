'''Idealized-coordinate geometry: vector measures, reference points, and rigid rotations'''
