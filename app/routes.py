import dataclasses

from flask import Blueprint, Response, abort, current_app, jsonify, request

from fleet_lib import VEHICLE_KINDS

main = Blueprint('main', __name__)


def get_fleet():
    return current_app.extensions['fleet']


def field_type_errors(vehicle_cls, fields):
    """Names of fields whose JSON value does not have the declared type.

    Only types are checked: a float field takes any number, an int field
    takes an integer, a bool field takes true/false. Ranges are not checked.
    """
    errors = []
    for f in dataclasses.fields(vehicle_cls):
        if not f.init or f.name not in fields:
            continue
        value = fields[f.name]
        if f.type is bool:
            ok = isinstance(value, bool)
        elif f.type is float:
            ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        elif f.type is int:
            ok = isinstance(value, int) and not isinstance(value, bool)
        else:
            ok = isinstance(value, f.type)
        if not ok:
            errors.append(f.name)
    return errors


@main.route('/fleet')
def fleet_overview():
    return Response(get_fleet().display_fleet(), mimetype='text/plain')


@main.route('/fleet/total')
def fleet_total():
    fleet = get_fleet()
    return jsonify({
        'total_value': fleet.calculate_total_value(),
        'vehicle_count': fleet.count()
    })


@main.route('/fleet/vehicles')
def list_vehicles():
    return jsonify([v.to_dict() for v in get_fleet()])


@main.route('/fleet/vehicles', methods=['POST'])
def add_vehicle():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description='Expected a JSON object')

    fields = dict(data)
    kind = fields.pop('kind', None)
    vehicle_cls = VEHICLE_KINDS.get(kind) if isinstance(kind, str) else None
    if vehicle_cls is None:
        abort(400, description=f"Unknown vehicle kind: {kind}")

    bad_fields = field_type_errors(vehicle_cls, fields)
    if bad_fields:
        abort(400, description=f"Wrong value type for: {', '.join(bad_fields)}")

    try:
        vehicle = vehicle_cls(**fields)
    except TypeError as e:
        abort(400, description=str(e))

    get_fleet().add_vehicle(vehicle)
    return jsonify(vehicle.to_dict()), 201
