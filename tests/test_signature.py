import pytest

from metadeseq.signature import Signature, SignatureError


def make_sig(name, hashes):
    return Signature(
        algorithm="minhash",
        kmer_size=21,
        num_hashes=len(hashes),
        hashes=list(hashes),
        name=name,
    )


def test_signature_new():
    sig = Signature("minhash", 21, 100)
    assert sig.algorithm == "minhash"
    assert sig.kmer_size == 21
    assert sig.num_hashes == 100
    assert sig.hashes == []
    assert sig.name is None
    assert sig.filename is None


def test_signature_add_hash():
    sig = Signature("minhash", 21, 2)
    sig.add_hash(100)
    sig.add_hash(50)
    assert sig.hashes == [100, 50]
    sig.add_hash(200)
    assert len(sig.hashes) == 2
    assert 200 not in sig.hashes


def test_jaccard_identical():
    sig = make_sig("sig1", [1, 2, 3, 4, 5])
    assert sig.jaccard(sig) == pytest.approx(1.0)


def test_jaccard_disjoint():
    assert make_sig("a", [1, 2, 3]).jaccard(make_sig("b", [4, 5, 6])) == pytest.approx(0.0)


def test_jaccard_partial_overlap():
    sig1 = make_sig("a", [1, 2, 3, 4])
    sig2 = make_sig("b", [3, 4, 5, 6])
    assert sig1.jaccard(sig2) == pytest.approx(1.0 / 3.0, abs=1e-9)


def test_jaccard_subset():
    sig1 = make_sig("a", [1, 2, 3, 4])
    sig2 = make_sig("b", [1, 2])
    assert sig1.jaccard(sig2) == pytest.approx(0.5, abs=1e-9)


def test_jaccard_empty():
    sig1 = make_sig("a", [1, 2])
    empty = make_sig("empty", [])
    assert sig1.jaccard(empty) == 0.0
    assert empty.jaccard(sig1) == 0.0
    assert empty.jaccard(empty) == 1.0


def test_jaccard_incompatible():
    sig1 = make_sig("a", [1, 2])
    sig2 = make_sig("b", [3, 4])
    sig2.kmer_size = 31
    with pytest.raises(SignatureError):
        sig1.jaccard(sig2)

    sig3 = make_sig("c", [5, 6])
    sig3.algorithm = "other_sketch"
    with pytest.raises(SignatureError):
        sig1.jaccard(sig3)


def test_merge_keeps_smallest_hashes():
    sig1 = Signature("minhash", 21, 3, hashes=[10, 5, 30])
    sig2 = Signature("minhash", 21, 3, hashes=[1, 5, 20])
    sig1.merge(sig2)
    assert sig1.hashes == [1, 5, 10]


def test_merge_under_capacity_takes_union():
    sig1 = Signature("minhash", 21, 10, hashes=[4, 2])
    sig2 = Signature("minhash", 21, 10, hashes=[3, 2])
    sig1.merge(sig2)
    assert sig1.hashes == [2, 3, 4]
    assert sig2.hashes == [3, 2]


def test_merge_incompatible():
    sig1 = make_sig("a", [1])
    sig2 = Signature("minhash", 31, 1, hashes=[2])
    with pytest.raises(SignatureError):
        sig1.merge(sig2)
    assert sig1.hashes == [1]