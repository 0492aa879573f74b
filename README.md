# metadeseq

Building blocks for metagenomic count analysis: DNA sequence helpers,
canonical k-mer counting, taxonomic lineages, MinHash-style signatures,
feature-by-sample count tables, sample metadata, count normalization
(median-of-ratios and counts per million) and FASTQ reading.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `metadeseq.sequence`: `is_valid_base` (A, C, G or T, any case) and
  `reverse_complement`, which upper-cases and turns every other base into `N`.
  Both accept `str` or `bytes`.
- `metadeseq.kmers`: `canonical_kmers` (a generator skipping k-mers with
  non-ACGT bases), `count_canonical_kmers` (a `Counter`, skipping k-mers that
  contain `N`), `process_sequences` (totals over many sequences) and the
  `KmerExtractor` dataclass with `k`, `canonical` and `skip_invalid` settings
  and a `count_kmers` method. String input gives string keys, bytes input
  gives bytes keys.
- `metadeseq.taxonomy`: the `TaxonomicLevel` enum (domain to strain, with
  `depth()` and `all_levels()`), the `TaxonomicLineage` dataclass
  (`set_level`, `get_level`, `most_specific_level`, `to_list`, and `str()`
  giving `"Bacteria; Proteobacteria"`), and `parse_lineage`.
- `metadeseq.signature`: the `Signature` dataclass with `add_hash` (ignores
  hashes beyond `num_hashes`), `merge` (keeps the smallest `num_hashes` of the
  union) and `jaccard`. Mismatched algorithms or k-mer sizes raise
  `SignatureError`.
- `metadeseq.count_table`: `CountTable`, a numpy features × samples matrix
  with named rows and columns; `from_data`, `add_sample`, `feature_counts`,
  `sample_counts` and `dimensions`. Inconsistent data raises `CountTableError`.
- `metadeseq.metadata`: `Metadata` (`add_sample`, `add_sample_attribute`,
  `conditions`, `sample_count`) and `load_metadata` for CSV sample sheets.
  Malformed files raise `MetadataError`.
- `metadeseq.normalization`: `normalize(table, method)` with the methods
  `median-of-ratios` (alias `deseq2`), `cpm` and `none`, case-insensitive;
  also `normalize_median_of_ratios` and `normalize_cpm`. Tables are changed in
  place. `tpm` and unknown names raise `NormalizationError`.
- `metadeseq.fastq`: `SequenceRecord`, `find_sequence_files` (existing
  `.fastq`/`.fq` files), `iter_sequences` and `read_sequences`. No input files
  or a malformed record raise `FastqError`.
- `metadeseq.tableio`: `write_count_table` (CSV with a `Feature` column and
  one column per sample) and `read_metadata`.

## Example

```python
from metadeseq.count_table import CountTable
from metadeseq.kmers import count_canonical_kmers
from metadeseq.normalization import normalize
from metadeseq.tableio import write_count_table

table = CountTable.from_data({
    "S1": count_canonical_kmers("ACGTACGT", 3),
    "S2": count_canonical_kmers("ACGTTTGCA", 3),
})
normalize(table, "median-of-ratios")
write_count_table(table, "counts.csv")
```

Metadata files are CSV with a sample column (`SampleID` or `Sample`) and a
condition column (`Condition` or `Group`); all other columns are kept as
per-sample attributes:

```python
from metadeseq.metadata import load_metadata

meta = load_metadata("metadata.csv")
print(meta.sample_count(), meta.conditions())
```

## What it does not do

- There is no command-line program; everything is used as a library.
- There is no differential abundance testing: the package stops at
  normalized count tables and does not compute fold changes or p-values.
- TPM normalization is not available, since count tables carry no feature
  lengths.
- Signatures are kept in memory only; there is no signature database, no
  genome download and no taxonomic classifier.