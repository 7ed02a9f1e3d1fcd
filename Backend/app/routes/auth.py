# Backend/app/routes/auth.py

import logging

from flask import Blueprint, redirect, render_template, request, session, url_for

logger = logging.getLogger(__name__)

# endpoints reachable without a session
PUBLIC_ENDPOINTS = {'auth.login', 'auth.do_login', 'static'}


def create_auth_bp(user_service):
    """
    Session login for the whole app:
      GET/POST /login     form + credential check
      POST     /logout    clear the session
      GET      /app/error access-denied page
    """
    auth_bp = Blueprint('auth', __name__)

    @auth_bp.route('/login', methods=['GET'])
    def login():
        if session.get('user_id'):
            return redirect(url_for('bidList.list'))
        return render_template(
            'login.html',
            error=request.args.get('error') is not None,
            logout=request.args.get('logout') is not None,
        )

    @auth_bp.route('/login', methods=['POST'])
    def do_login():
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')
        user = user_service.authenticate(username, password)
        if user is None:
            return redirect(url_for('auth.login', error='true'))

        session.clear()
        session['user_id'] = user.id
        session['username'] = user.username
        session['role'] = user.role
        return redirect(url_for('bidList.list'))

    @auth_bp.route('/logout', methods=['POST'])
    def logout():
        logger.info(f"User '{session.get('username')}' logged out")
        session.clear()
        return redirect(url_for('auth.login', logout='true'))

    @auth_bp.route('/app/error', methods=['GET'])
    def access_denied():
        return render_template('403.html'), 403

    return auth_bp


def require_login():
    """before_request hook: anonymous requests are sent to the login page."""
    if request.endpoint is None or request.endpoint in PUBLIC_ENDPOINTS:
        return None
    if not session.get('user_id'):
        return redirect(url_for('auth.login'))
    return None
