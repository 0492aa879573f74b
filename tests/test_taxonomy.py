from metadeseq.taxonomy import TaxonomicLevel, TaxonomicLineage, parse_lineage


def test_taxonomic_level_as_str():
    names = [level.value for level in TaxonomicLevel.all_levels()]
    assert names == [
        "domain",
        "phylum",
        "class",
        "order",
        "family",
        "genus",
        "species",
        "strain",
    ]
    assert TaxonomicLevel("domain") is TaxonomicLevel.DOMAIN
    assert str(TaxonomicLevel.SPECIES) == "species"


def test_taxonomic_level_depth():
    assert TaxonomicLevel.DOMAIN.depth() == 1
    assert TaxonomicLevel.SPECIES.depth() == 7
    assert TaxonomicLevel.STRAIN.depth() == 8


def test_all_levels_order():
    levels = TaxonomicLevel.all_levels()
    assert levels[0] is TaxonomicLevel.DOMAIN
    assert levels[-1] is TaxonomicLevel.STRAIN
    assert [level.depth() for level in levels] == list(range(1, 9))


def test_taxonomic_lineage_basics():
    lineage = TaxonomicLineage()
    assert lineage.get_level(TaxonomicLevel.DOMAIN) is None
    assert str(lineage) == ""
    assert lineage.most_specific_level() is None

    lineage.set_level(TaxonomicLevel.PHYLUM, "Proteobacteria")
    lineage.set_level(TaxonomicLevel.DOMAIN, "Bacteria")

    assert lineage.get_level(TaxonomicLevel.DOMAIN) == "Bacteria"
    assert str(lineage) == "Bacteria; Proteobacteria"
    assert lineage.most_specific_level() is TaxonomicLevel.PHYLUM

    pairs = lineage.to_list()
    assert len(pairs) == 2
    assert pairs[0][0] is TaxonomicLevel.DOMAIN
    assert pairs[1][0] is TaxonomicLevel.PHYLUM


def test_parse_lineage():
    lineage = parse_lineage(
        "Bacteria; Proteobacteria; Gammaproteobacteria; Enterobacterales; "
        "Enterobacteriaceae; Escherichia; Escherichia coli"
    )
    assert lineage.get_level(TaxonomicLevel.DOMAIN) == "Bacteria"
    assert lineage.get_level(TaxonomicLevel.GENUS) == "Escherichia"
    assert lineage.get_level(TaxonomicLevel.SPECIES) == "Escherichia coli"
    assert lineage.most_specific_level() is TaxonomicLevel.SPECIES


def test_parse_lineage_skips_empty_parts_and_extra_levels():
    lineage = parse_lineage("Bacteria;;Class;4;5;6;7;8;9")
    assert lineage.get_level(TaxonomicLevel.PHYLUM) is None
    assert lineage.get_level(TaxonomicLevel.CLASS) == "Class"
    assert lineage.get_level(TaxonomicLevel.STRAIN) == "8"
    assert len(lineage.to_list()) == 7


def test_lineage_with_tax_id():
    lineage = TaxonomicLineage(tax_id="562")
    assert lineage.tax_id == "562"
    lineage.tax_id = "1280"
    assert lineage.tax_id == "1280"