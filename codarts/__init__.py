"""
# CODAR SeaSonde Time Series file format.

A TS file is the raw acquisition of a radar: a header describing the
acquisition followed by the sweeps of (I, Q) samples, everything encoded in
tagged blocks of big-endian values.

Two basic main operations are defined for the file format and its blocks:

 1. unpack(): reading the binary data and build a high-level representation
    of that, i.e. the ordered sequence of the blocks.

 2. pack(): encode the high-level representation into binary data.

to these we add one more

 3. relayout(): the container blocks enclose the ones that follow them, so
    their size must be calculated again each time the content changes.
    When a file is generated from text this is done just before packing.

Between the high-level representation and the text there are two more
operations, dump() and load(), used to inspect a file and to generate a new
one from an edited dump (see the tsdump and tsgen commands).
"""
