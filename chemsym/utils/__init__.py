'''General-purpose utilities not specific to any particular shape or stereochemical concept'''
