"""Template helper integration tests."""
import pytest
from flask import render_template_string

from assetpack import create_app
from assetpack.core.errors import DeprecatedFeatureError, PackageNotFound
from assetpack.core.helpers import (
    HELPERS,
    include_javascripts,
    include_stylesheets,
    include_templates,
    javascript_paths,
    stylesheet_paths,
    template_paths,
)
from assetpack.core.resolver import DATA_URI_END, DATA_URI_START, MHTML_END, MHTML_START

LINK = '<link href="%s" media="screen" rel="stylesheet" type="text/css" />'


def test_helpers_registered_as_globals(app):
    for name in HELPERS:
        assert name in app.jinja_env.globals


def test_embedded_stylesheets(app):
    with app.test_request_context('/'):
        html = render_template_string("{{ include_stylesheets('app') }}")

    assert html == '\n'.join([
        DATA_URI_START,
        LINK % '/assets/app-datauri.css',
        DATA_URI_END,
        MHTML_START,
        LINK % '/assets/app-mhtml.css',
        MHTML_END,
    ])


def test_embedding_disabled_in_template(app):
    with app.test_request_context('/'):
        html = render_template_string("{{ include_stylesheets('app', 'admin', embed_assets=false) }}")

    assert html == '\n'.join([LINK % '/assets/app.css', LINK % '/assets/admin.css'])


def test_extra_options_become_attributes(app):
    app.config['EMBED_ASSETS'] = 'off'
    with app.test_request_context('/'):
        html = include_stylesheets('app', media='print', class_='theme')

    assert html == '<link class="theme" href="/assets/app.css" media="print" rel="stylesheet" type="text/css" />'


def test_debug_assets_links_sources(app):
    with app.test_request_context('/?debug_assets=true'):
        html = include_stylesheets('app')
        scripts = include_javascripts('app', 'admin')

    assert html == '\n'.join([LINK % '/static/css/reset.css', LINK % '/static/css/app.css'])
    assert scripts == '\n'.join([
        '<script src="/static/js/app.js" type="text/javascript"></script>',
        '<script src="/static/js/admin/models.js" type="text/javascript"></script>',
        '<script src="/static/js/admin/views.js" type="text/javascript"></script>',
    ])


def test_packaged_javascripts(app):
    with app.test_request_context('/'):
        html = render_template_string("{{ include_javascripts('app') }}")

    assert html == '<script src="/assets/app.js" type="text/javascript"></script>'


def test_datauri_only_mode(app):
    app.config['EMBED_ASSETS'] = 'datauri'
    with app.test_request_context('/'):
        assert stylesheet_paths('app') == ['/assets/app-datauri.css', '/assets/app.css']


def test_path_helpers(app):
    with app.test_request_context('/'):
        assert stylesheet_paths('app', embed_images=False) == ['/assets/app.css']
        assert javascript_paths('app', 'admin') == ['/assets/app.js', '/assets/admin.js']
        assert template_paths('app') == ['/assets/app.jst']


def test_template_paths_ignore_packaging_mode(app):
    with app.test_request_context('/?debug_assets=1'):
        assert template_paths('admin') == ['/assets/admin.jst']


def test_include_templates_always_fails(app):
    with app.test_request_context('/'):
        with pytest.raises(DeprecatedFeatureError):
            include_templates('app')
        with pytest.raises(DeprecatedFeatureError):
            render_template_string("{{ include_templates() }}")


def test_unknown_package_propagates(app):
    with app.test_request_context('/?debug_assets=true'):
        with pytest.raises(PackageNotFound):
            include_stylesheets('missing')


def test_custom_packager_and_renderer(packager, renderer):
    app = create_app('testing', packager=packager, renderer=renderer)

    with app.test_request_context('/'):
        assert include_javascripts('admin') == '[js /pkg/admin.js]'

    assert renderer.calls == [('js', ['/pkg/admin.js'], {})]


class TestErrorHandlers:

    @pytest.fixture
    def app(self):
        app = create_app('testing')
        app.config['PROPAGATE_EXCEPTIONS'] = False

        @app.route('/templates')
        def templates_page():
            return render_template_string("{{ include_templates('app') }}")

        @app.route('/missing')
        def missing_page():
            return render_template_string("{{ include_stylesheets('missing') }}")

        return app

    def test_deprecated_helper(self, client):
        response = client.get('/templates')

        assert response.status_code == 500
        assert response.mimetype == 'text/plain'

    def test_missing_package(self, client):
        response = client.get('/missing?debug_assets=true')

        assert response.status_code == 500
        assert response.get_data(as_text=True) == 'Internal server error'
