from flask import Blueprint, Flask, current_app, flash, g, redirect, render_template, request, url_for
import click
import structlog
from flask.cli import AppGroup, with_appcontext
from flask_wtf.csrf import CSRFProtect
from markupsafe import Markup

from auth import admin_required, check_admin_password, is_admin, login_admin, logout_admin
from config import get_config
from constants import (
    SETTINGS_PAGE, PAGE_TITLE, MENU_TITLE, SECTION_TITLE, SECTION_TEXT,
    TOKEN_FIELD_LABEL, TOKEN_FIELD_NAME, TOKEN_INPUT_PATTERN, TOKEN_MIN_LENGTH,
)
from models import db, migrate, Settings
from services import (
    BeaconEmitter, DatabaseOptionStore, OptionStoreError, ScriptRegistry,
    get_token, run_page_render, save_options,
)
from utils import configure_logging, escape_attr

logger = structlog.get_logger()

site = Blueprint('site', __name__)
admin = Blueprint('admin', __name__, url_prefix='/admin')

csrf = CSRFProtect()


# ============================================
# PAGE HOOKS
# ============================================

class PageHooks:
    """Observers run on every front-end render and rewriters applied to script tags."""

    def __init__(self):
        self.observers = []
        self.rewriters = []

    def add(self, hook):
        if hasattr(hook, 'on_page_render'):
            self.observers.append(hook)
        if hasattr(hook, 'rewrite_tag'):
            self.rewriters.append(hook)


def get_scripts():
    """Script registry for the current request, filled on first access."""
    if 'scripts' not in g:
        hooks = current_app.extensions['page_hooks']
        g.scripts = run_page_render(hooks.observers, ScriptRegistry(hooks.rewriters))
    return g.scripts


def print_head_scripts():
    return get_scripts().print_scripts(in_footer=False)


def print_footer_scripts():
    return get_scripts().print_scripts(in_footer=True)


# ============================================
# ROUTES - SITE
# ============================================

@site.route('/')
def index():
    return render_template('index.html')


# ============================================
# ROUTES - ADMIN
# ============================================

@admin.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'POST':
        if check_admin_password(request.form.get('password')):
            login_admin()
            logger.info("Admin logged in", remote_addr=request.remote_addr)
            return redirect(url_for('admin.options_page'))
        logger.warning("Admin login failed", remote_addr=request.remote_addr)
        flash('Incorrect password.', 'danger')
        return redirect(url_for('admin.login'))

    if is_admin():
        return redirect(url_for('admin.options_page'))
    return render_template('admin/login.html', page_title=PAGE_TITLE)


@admin.route('/logout', methods=['POST'])
def logout():
    logout_admin()
    flash('Logged out.', 'success')
    return redirect(url_for('admin.login'))


@admin.route('/options/' + SETTINGS_PAGE, methods=['GET', 'POST'])
@admin_required
def options_page():
    store = DatabaseOptionStore()

    if request.method == 'POST':
        submitted = {'token': request.form.get(TOKEN_FIELD_NAME)}
        try:
            result = save_options(store, submitted)
        except OptionStoreError:
            flash('Settings could not be saved. Please try again.', 'danger')
            return redirect(url_for('admin.options_page'))

        for error in result.errors:
            flash(error.message, 'danger' if error.type == 'error' else error.type)
        if not result.errors:
            flash('Settings saved.', 'success')
        return redirect(url_for('admin.options_page'))

    try:
        token = get_token(store)
    except OptionStoreError:
        flash('Settings could not be loaded.', 'warning')
        token = ''

    return render_template(
        'admin/options.html',
        page_title=PAGE_TITLE,
        menu_title=MENU_TITLE,
        section_title=SECTION_TITLE,
        section_text=SECTION_TEXT,
        field_label=TOKEN_FIELD_LABEL,
        token_field=token_field(token),
    )


def token_field(token):
    """Markup for the token text input."""
    return Markup(
        "<input id='token' name='{name}' pattern='{pattern}' minlength='{minlength}' type='text' value='{value}'/>"
    ).format(name=TOKEN_FIELD_NAME, pattern=TOKEN_INPUT_PATTERN, minlength=TOKEN_MIN_LENGTH, value=escape_attr(token))


# ============================================
# CLI
# ============================================

@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create database tables."""
    init_db(current_app)
    click.echo('Database initialized.')


token_cli = AppGroup('token', help='Show or change the analytics token.')


@token_cli.command('show')
def token_show():
    token = get_token(DatabaseOptionStore())
    click.echo(token if token else '(no token configured)')


@token_cli.command('set')
@click.argument('value')
def token_set(value):
    result = save_options(DatabaseOptionStore(), {'token': value})
    for error in result.errors:
        click.echo(f'Warning: {error.message}', err=True)
    click.echo(f'Token saved: {result.token}')


@token_cli.command('clear')
def token_clear():
    save_options(DatabaseOptionStore(), {'token': ''})
    click.echo('Token cleared.')


# ============================================
# APP FACTORY
# ============================================

def create_app(config_class=None):
    if config_class is None or isinstance(config_class, str):
        config_class = get_config(config_class)

    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app.config['LOG_LEVEL'], app.config['LOG_JSON'])

    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    hooks = PageHooks()
    hooks.add(BeaconEmitter(DatabaseOptionStore(), src=app.config['BEACON_URL']))
    app.extensions['page_hooks'] = hooks

    app.jinja_env.globals['print_head_scripts'] = print_head_scripts
    app.jinja_env.globals['print_footer_scripts'] = print_footer_scripts
    app.jinja_env.globals['settings_menu'] = [(MENU_TITLE, 'admin.options_page')]

    app.register_blueprint(site)
    app.register_blueprint(admin)

    app.cli.add_command(init_db_command)
    app.cli.add_command(token_cli)

    logger.debug("App created", config=config_class.__name__)
    return app


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    with app.app_context():
        db.create_all()
        logger.info("Tables created", tables=[Settings.__tablename__])


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
