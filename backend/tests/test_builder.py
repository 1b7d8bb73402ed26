# File: backend/tests/test_builder.py
# Version: v0.1.0
"""
Unit tests for primer-set orchestration:
- required-input and parser error propagation
- F2/FIP derivation and the f2-and-b2 BIP/B2 branch
- placeholder source substitution
- immutability and recorded parameters
"""

from __future__ import annotations

import dataclasses

import pytest
from pydantic import ValidationError

from backend.app.core.primer.builder import PrimerSetBuilder, build_primer_set
from backend.app.core.primer.constants import BIP_ADAPTER, FIP_ADAPTER, INVALID_CHARACTERS_MESSAGE
from backend.app.core.primer.errors import InvalidBase, InvalidSequence, MissingInput
from backend.app.core.primer.models import PrimerRole
from backend.app.core.primer.parameters import (
    Architecture,
    DesignParameters,
    DesignRequest,
    MicroRnaInput,
)
from backend.app.core.primer.placeholders import LiteralPrimerSource, PlaceholderPrimers
from backend.app.core.primer.template import assemble_template
from backend.app.core.primer.thermodynamics import reverse_complement

LET7A_DNA = "TGAGGTAGTAGGTTGTATAGTT"
MIR21_DNA = "TAGCTTATCAGACTGATGTTGA"


def test_f2_only_end_to_end(let7a):
    ps = build_primer_set(Architecture.F2_ONLY, let7a)
    f2 = ps.get(PrimerRole.F2).sequence
    assert f2 == LET7A_DNA[2:]
    assert ps.get(PrimerRole.FIP).sequence == FIP_ADAPTER + f2
    for r in ps:
        assert r.profile.length == len(r.sequence) > 0
        if r.role is not PrimerRole.TEMPLATE:
            assert r.profile.tm is not None
            assert r.profile.dg is not None


def test_record_order_and_roles(let7a):
    ps = build_primer_set(Architecture.F2_ONLY, let7a)
    assert [r.role.value for r in ps] == ["LF", "LB", "FIP", "BIP", "F2", "B2", "F1c", "B1c", "Template"]


def test_template_built_from_set(let7a):
    ps = build_primer_set(Architecture.F2_ONLY, let7a)
    s = ps.sequences()
    assert ps.template.sequence == assemble_template(s["FIP"], s["LF"], s["F1c"], s["B1c"], s["LB"], s["BIP"])
    assert ps.template.sequence.startswith(s["FIP"])
    assert ps.template.sequence.endswith(reverse_complement(s["BIP"]))
    assert ps.template.profile.tm is None
    assert ps.template.profile.dg is None
    assert ps.template.hairpin is None


def test_hairpin_only_on_loop_and_inner_primers(let7a):
    ps = build_primer_set(Architecture.F2_ONLY, let7a)
    assert ps.get(PrimerRole.FIP).hairpin == "1 weak"
    for role in (PrimerRole.LF, PrimerRole.LB, PrimerRole.BIP):
        assert ps.get(role).hairpin == "None"
    for role in (PrimerRole.F2, PrimerRole.B2, PrimerRole.F1C, PrimerRole.B1C, PrimerRole.TEMPLATE):
        assert ps.get(role).hairpin is None


def test_single_input_uses_placeholder_bip_b2(let7a):
    lit = PlaceholderPrimers()
    ps = build_primer_set(Architecture.F2_ONLY, let7a)
    assert ps.get(PrimerRole.BIP).sequence == lit.bip
    assert ps.get(PrimerRole.B2).sequence == lit.b2
    assert ps.get(PrimerRole.LF).sequence == lit.lf
    assert ps.get(PrimerRole.F1C).sequence == lit.f1c


def test_b2_only_matches_f2_only(let7a):
    a = build_primer_set(Architecture.F2_ONLY, let7a)
    b = build_primer_set(Architecture.B2_ONLY, let7a)
    assert a.sequences() == b.sequences()
    assert b.architecture.label == "B2 Only"


def test_f2_and_b2_branch(let7a, mir21):
    ps = build_primer_set(Architecture.F2_AND_B2, let7a, mir21)
    assert ps.get(PrimerRole.B2).sequence == MIR21_DNA
    assert ps.get(PrimerRole.BIP).sequence == BIP_ADAPTER + MIR21_DNA[1:]
    assert [t.sequence for t in ps.targets] == [LET7A_DNA, MIR21_DNA]
    assert ps.targets[1].name == "hsa-miR-21-5p"


def test_dna_input_designs_same_set_as_rna(let7a):
    dna = MicroRnaInput(name=let7a.name, sequence="TGAGGTAGTAGGTTGTATAGTT")
    a = build_primer_set(Architecture.F2_ONLY, let7a)
    b = build_primer_set(Architecture.F2_ONLY, dna)
    assert a.sequences() == b.sequences()


def test_second_input_ignored_for_single_architecture(let7a, mir21):
    ps = build_primer_set(Architecture.F2_ONLY, let7a, mir21)
    assert len(ps.targets) == 1


def test_blank_second_name_is_missing_input_even_if_first_invalid():
    bad1 = MicroRnaInput(name="x", sequence="ACGX")
    blank2 = MicroRnaInput(name="  ", sequence="UAGCUU")
    with pytest.raises(MissingInput):
        build_primer_set(Architecture.F2_AND_B2, bad1, blank2)
    with pytest.raises(MissingInput):
        build_primer_set(Architecture.F2_AND_B2, bad1, None)


def test_blank_first_input_is_missing(let7a):
    with pytest.raises(MissingInput):
        build_primer_set(Architecture.F2_ONLY, MicroRnaInput(name="", sequence="UGAG"))
    with pytest.raises(MissingInput):
        build_primer_set(Architecture.F2_ONLY, MicroRnaInput(name="let-7a", sequence="   "))


def test_header_only_input_is_missing():
    with pytest.raises(MissingInput):
        build_primer_set(Architecture.F2_ONLY, MicroRnaInput(name="let-7a", sequence=">let-7a\n"))


def test_invalid_sequence_propagates_reason(let7a):
    with pytest.raises(InvalidSequence) as ei:
        build_primer_set(Architecture.F2_AND_B2, let7a, MicroRnaInput(name="m2", sequence="UAGXCUU"))
    assert ei.value.reason == INVALID_CHARACTERS_MESSAGE
    assert ei.value.label == "second"


def test_parameters_are_recorded_not_applied(let7a):
    params = DesignParameters(targetGC=65, targetTm=70.0, lengthAdjustment=-3)
    a = build_primer_set(Architecture.F2_ONLY, let7a, parameters=params)
    b = build_primer_set(Architecture.F2_ONLY, let7a)
    assert a.parameters == params
    assert a.sequences() == b.sequences()


def test_parameters_are_validated():
    with pytest.raises(ValidationError):
        DesignParameters(targetGC=101)
    with pytest.raises(ValidationError):
        DesignParameters(targetTm=-1)


def test_primer_set_is_immutable(let7a):
    ps = build_primer_set(Architecture.F2_ONLY, let7a)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ps.records = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        ps.records[0].sequence = "A"


class _ShortLoopSource(LiteralPrimerSource):
    def sequence(self, role):
        if role is PrimerRole.LF:
            return "ACGTACGTAC"
        return super().sequence(role)

    def hairpin(self, role):
        return "2 strong" if role is PrimerRole.LB else super().hairpin(role)


def test_source_can_be_substituted(let7a):
    ps = PrimerSetBuilder(_ShortLoopSource()).build(DesignRequest(mirna1=let7a))
    assert ps.get(PrimerRole.LF).sequence == "ACGTACGTAC"
    assert ps.get(PrimerRole.LF).profile.tm == 35.0
    assert ps.get(PrimerRole.LB).hairpin == "2 strong"
    assert reverse_complement("ACGTACGTAC") in ps.template.sequence


def test_malformed_placeholder_raises_invalid_base(let7a):
    class _Broken(LiteralPrimerSource):
        def sequence(self, role):
            return "ACGN" if role is PrimerRole.F1C else super().sequence(role)

    with pytest.raises(InvalidBase):
        PrimerSetBuilder(_Broken()).build(DesignRequest(mirna1=let7a))


def test_placeholder_literals_are_validated():
    with pytest.raises(ValidationError):
        PlaceholderPrimers(lf="ACGU")
    assert PlaceholderPrimers(lf=" acgt ").lf == "ACGT"
