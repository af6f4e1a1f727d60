"""
--------------------------------------------------------------------------------
<seqalgebra project>
src/seqalgebra/src/__init__.py

Internal package root for seqalgebra implementation.

Internal modules:

- alphabet: shared Enum mixins (codec, rank, redundancy algebra)
- nucleotide, amino_acid, tags: the concrete alphabets
- codon, seq: codon values and symbol-stream adapters
- tables, genetic_code, translate, batch: genetic-code lookups
- wrappers: Stopped / Gapped sum types
- config, logging_setup, translator: ambient configuration and the facade

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""
