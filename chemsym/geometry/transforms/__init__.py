'''Transformations of idealized coordinates'''
