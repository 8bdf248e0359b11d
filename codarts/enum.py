from enum import Flag


class Compliant(Flag):
    '''It indicates which degree of compliantness the data must reflect the format'''
    NONE  = 0
    # the first block must be AQLV
    MAGIC = 1 << 0
    # a block larger than the data available is an error instead of being truncated
    SIZE  = 1 << 1
