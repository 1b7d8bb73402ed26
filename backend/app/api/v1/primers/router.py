# File: backend/app/api/v1/primers/router.py
# Version: v0.3.0
"""
Primer endpoints (LAMP primer sets for microRNA targets):
- GET  /architectures       ← supported architectures and their labels
- GET  /parameters          ← default design parameters, reaction conditions, options
- POST /parse               ← normalize/validate raw input, with length and GC%
- POST /thermo              ← length, GC%, Tm and ΔG of one oligo
- POST /reverse-complement  ← strict reverse complement
- POST /template            ← ultramer template from six primers
- POST /design              ← full primer set for one or two microRNAs

Core errors (DesignError) map to 400 with {"error": kind, "message": text}.
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from backend.app.config.config_lamp import LampDefaults
from backend.app.core.primer.builder import PrimerSetBuilder
from backend.app.core.primer.errors import DesignError
from backend.app.core.primer.parameters import Architecture, DesignRequest
from backend.app.core.primer.schemas import (
    ArchitectureInfo,
    DefaultsResponse,
    DesignRunRequest,
    ParseRequest,
    ParseResponse,
    PrimerSetResponse,
    ReverseComplementRequest,
    ReverseComplementResponse,
    TemplateRequest,
    TemplateResponse,
    ThermoRequest,
    ThermoResponse,
)
from backend.app.core.primer.sequence import parse_sequence
from backend.app.core.primer.template import assemble_template
from backend.app.core.primer.thermodynamics import (
    delta_g,
    gc_content,
    melting_temperature,
    reverse_complement,
)

from .deps import lamp_defaults, primer_set_builder

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/primers", tags=["primers"])


def _bad_request(exc: DesignError) -> HTTPException:
    return HTTPException(status_code=400, detail={"error": exc.kind, "message": str(exc)})


@router.get("/architectures", response_model=List[ArchitectureInfo])
def list_architectures():
    return [
        ArchitectureInfo(value=a, label=a.label, requiresSecondInput=a.requires_second_input)
        for a in Architecture
    ]


@router.get("/parameters", response_model=DefaultsResponse)
def get_parameters(defaults: LampDefaults = Depends(lamp_defaults)):
    """Return the default parameters used when a design request omits them."""
    return DefaultsResponse(
        parameters=defaults.parameters,
        conditions=defaults.conditions,
        options=defaults.options,
    )


@router.post("/parse", response_model=ParseResponse)
def parse(payload: ParseRequest):
    """Normalize raw input (FASTA/RNA/DNA) and report length and GC% when valid."""
    res = parse_sequence(payload.sequence)
    if not res.valid:
        return ParseResponse(valid=False, sequence="", error=res.error)
    return ParseResponse(valid=True, sequence=res.sequence, length=len(res.sequence), gc=gc_content(res.sequence))


@router.post("/thermo", response_model=ThermoResponse)
def thermo(payload: ThermoRequest, defaults: LampDefaults = Depends(lamp_defaults)):
    c = payload.conditions or defaults.conditions
    seq = payload.sequence.strip().upper()
    try:
        tm = melting_temperature(seq, na_conc=c.naConc, mg_conc=c.mgConc, primer_conc=c.primerConc, dntp_conc=c.dntpConc)
        dg = delta_g(seq, temperature=c.temperature, na_conc=c.naConc, mg_conc=c.mgConc, dntp_conc=c.dntpConc)
    except DesignError as exc:
        raise _bad_request(exc) from exc
    return ThermoResponse(sequence=seq, length=len(seq), gc=gc_content(seq), tm=tm, dg=dg)


@router.post("/reverse-complement", response_model=ReverseComplementResponse)
def reverse_complement_endpoint(payload: ReverseComplementRequest):
    seq = payload.sequence.strip()
    try:
        rc = reverse_complement(seq)
    except DesignError as exc:
        raise _bad_request(exc) from exc
    return ReverseComplementResponse(sequence=seq.upper(), reverseComplement=rc)


@router.post("/template", response_model=TemplateResponse)
def template(payload: TemplateRequest):
    """Assemble the ultramer template from FIP, LF, F1c, B1c, LB, BIP."""
    try:
        seq = assemble_template(payload.fip, payload.lf, payload.f1c, payload.b1c, payload.lb, payload.bip)
    except DesignError as exc:
        raise _bad_request(exc) from exc
    return TemplateResponse(sequence=seq, length=len(seq), gc=gc_content(seq))


@router.post("/design", response_model=PrimerSetResponse, response_model_exclude_none=True)
def design_primer_set(
    payload: DesignRunRequest,
    defaults: LampDefaults = Depends(lamp_defaults),
    builder: PrimerSetBuilder = Depends(primer_set_builder),
):
    """
    Build the LAMP primer set for the selected architecture.
    Omitted parameters/conditions/options fall back to the configured defaults.
    """
    request = DesignRequest(
        architecture=payload.architecture,
        mirna1=payload.mirna1,
        mirna2=payload.mirna2,
        parameters=payload.parameters or defaults.parameters,
        conditions=payload.conditions or defaults.conditions,
        options=payload.options or defaults.options,
    )
    try:
        primer_set = builder.build(request)
    except DesignError as exc:
        log.info("Design rejected (%s): %s", exc.kind, exc)
        raise _bad_request(exc) from exc

    log.info(
        "Designed %s primer set for %s (%d records)",
        primer_set.architecture.value,
        ", ".join(t.name for t in primer_set.targets),
        len(primer_set),
    )
    return PrimerSetResponse.from_primer_set(primer_set)
