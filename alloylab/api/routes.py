"""JSON routes for design evaluation, reference data and report export."""
import logging

from flask import Response, current_app, jsonify, request

from alloylab.exceptions import DomainError
from alloylab.services import (
    ComparisonService, DEFAULT_COMPOSITION, ELEMENT_DATA, ELEMENTS,
    QUENCH_CONFIGS, ProcessParameters, evaluate, generate_text_report,
    reference_snapshot, report_filename,
)
from alloylab.services.comparison_service import REFERENCE_NAME, REFERENCE_PROCESS

from . import api_bp
from .forms import AlloyDesignForm

logger = logging.getLogger(__name__)


@api_bp.errorhandler(DomainError)
def handle_domain_error(error):
    """Map engine domain errors to 422 responses."""
    logger.warning(f"Design rejected: {error}")
    return jsonify({'error': error.code, 'message': error.message}), 422


def _read_design():
    """Validate the request body and build (name, composition, process).

    Returns None and a 400 response when validation fails.
    """
    form = AlloyDesignForm(meta={'csrf': False})
    if not form.validate_on_submit():
        return None, (jsonify({'errors': form.errors}), 400)

    cfg = current_app.config
    payload = request.get_json(silent=True) or {}

    # The default design applies only when no composition was sent at all;
    # an explicit empty composition is pure iron.
    nested = payload.get('composition')
    fields = form.element_weights()
    if not isinstance(nested, dict) and not fields:
        composition = dict(DEFAULT_COMPOSITION)
    else:
        composition = dict(nested or {})
        composition.update(fields)

    process = ProcessParameters(
        quench_medium=form.quench_medium.data or cfg['ALLOY_DEFAULT_QUENCH'],
        grain_size=(form.grain_size.data if form.grain_size.data is not None
                    else cfg['ALLOY_DEFAULT_GRAIN_SIZE']),
        target_yield_strength=(form.target_yield_strength.data
                               if form.target_yield_strength.data is not None
                               else cfg['ALLOY_DEFAULT_TARGET_YS']),
    )
    name = form.name.data or cfg['ALLOY_DEFAULT_NAME']
    return (name, composition, process), None


@api_bp.route('/elements')
def elements():
    """Element reference table and quench media."""
    return jsonify({
        'elements': [
            {
                'symbol': d.symbol,
                'name': d.name,
                'cost': d.cost,
                'density': d.density,
                'max_wt_pct': d.max_wt_pct,
            }
            for d in (ELEMENT_DATA[el] for el in ELEMENTS)
        ],
        'quench_media': [
            {
                'name': q.name,
                'quench_temperature': q.quench_temperature,
                'cooling_rate': q.cooling_rate,
            }
            for q in QUENCH_CONFIGS.values()
        ],
    })


@api_bp.route('/defaults')
def defaults():
    """Starting design offered to clients."""
    cfg = current_app.config
    return jsonify({
        'name': cfg['ALLOY_DEFAULT_NAME'],
        'composition': DEFAULT_COMPOSITION,
        'quench_medium': cfg['ALLOY_DEFAULT_QUENCH'],
        'grain_size': cfg['ALLOY_DEFAULT_GRAIN_SIZE'],
        'target_yield_strength': cfg['ALLOY_DEFAULT_TARGET_YS'],
    })


@api_bp.route('/reference')
def reference():
    """Snapshot of the reference alloy."""
    return jsonify({
        'name': REFERENCE_NAME,
        'quench_medium': REFERENCE_PROCESS.quench_medium,
        'grain_size': REFERENCE_PROCESS.grain_size,
        'snapshot': reference_snapshot().to_dict(),
    })


@api_bp.route('/evaluate', methods=['POST'])
def evaluate_design():
    """Evaluate a design and compare it with the reference alloy."""
    design, error = _read_design()
    if error:
        return error
    name, composition, process = design

    snapshot = evaluate(composition, process)
    return jsonify({
        'name': name,
        'snapshot': snapshot.to_dict(),
        'comparison': ComparisonService.compare(snapshot).to_dict(),
        'assessment': ComparisonService.assess_design(
            snapshot, process.target_yield_strength).to_dict(),
        'ashby': [p.to_dict() for p in ComparisonService.ashby_points(name, snapshot)],
    })


@api_bp.route('/report', methods=['POST'])
def export_report():
    """Download the plain-text technical report for a design."""
    design, error = _read_design()
    if error:
        return error
    name, composition, process = design

    snapshot = evaluate(composition, process)
    text = generate_text_report(name, snapshot)
    return Response(
        text,
        mimetype='text/plain',
        headers={'Content-Disposition': f'attachment; filename="{report_filename(name)}"'},
    )
