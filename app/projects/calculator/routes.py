import logging

from flask import Blueprint, current_app, flash, jsonify, redirect, render_template, request, session, url_for

from app import csrf
from app.projects.calculator.core.accumulator import initial_state
from app.projects.calculator.core.constants import KEYPAD_ROWS, KEYS
from app.projects.calculator.core.errors import CalculatorError, InvalidKeyError, InvalidStateError
from app.projects.calculator.core.keys import press as press_key
from app.projects.calculator.core.serialization import state_from_dict, state_to_dict
from app.projects.calculator.forms import KeyPressForm
from app.projects.registry import get_project_by_id
from app.utils.logging import log_project_visit

logger = logging.getLogger(__name__)

calculator_bp = Blueprint('calculator', __name__,
                          template_folder='templates')

SESSION_KEY = 'calculator_state'


def _page_settings():
    """Title, description and locale for the page shell."""
    config = current_app.config
    return {
        'title': config['CALCULATOR_TITLE'],
        'description': config['CALCULATOR_DESCRIPTION'],
        'locale': config['CALCULATOR_LOCALE'],
    }


def _load_state():
    """Current calculator state from the session, or a fresh one."""
    data = session.get(SESSION_KEY)
    if data is None:
        return initial_state()
    try:
        return state_from_dict(data)
    except InvalidStateError as e:
        logger.warning(f"Discarding unreadable calculator state: {e}")
        return initial_state()


def _save_state(state):
    session[SESSION_KEY] = state_to_dict(state)


def _render(state):
    return render_template('calculator.html',
                           state=state,
                           form=KeyPressForm(),
                           keypad=KEYPAD_ROWS,
                           page=_page_settings())


@calculator_bp.route('/')
def index():
    """Mount a fresh calculator and display it"""
    state = initial_state()
    _save_state(state)

    project = get_project_by_id('calculator')
    log_project_visit('calculator', project['name'] if project else 'Calculator')
    return _render(state)


@calculator_bp.route('/current')
def show():
    """Display the session calculator without resetting it"""
    return _render(_load_state())


@calculator_bp.route('/press', methods=['POST'])
def press():
    """Apply one keypad press to the session calculator"""
    form = KeyPressForm()
    state = _load_state()

    if form.validate_on_submit():
        try:
            state = press_key(state, form.key.data)
        except InvalidKeyError as e:
            flash(str(e), 'error')
        else:
            _save_state(state)
    else:
        for errors in form.errors.values():
            for error in errors:
                flash(error, 'error')

    return redirect(url_for('calculator.show'))


@calculator_bp.route('/api/keys')
def api_keys():
    """Keypad labels in display order"""
    return jsonify({'keys': list(KEYS)})


@calculator_bp.route('/api/press', methods=['POST'])
@csrf.exempt
def api_press():
    """Apply one key press to a client-held state and return the next state"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    try:
        raw_state = data.get('state')
        state = initial_state() if raw_state is None else state_from_dict(raw_state)
        state = press_key(state, data.get('key'))
    except CalculatorError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({
        'display': state.display,
        'state': state_to_dict(state),
    })
