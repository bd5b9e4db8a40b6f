from datetime import datetime
from flask import Flask, render_template_string, request, jsonify, abort

from catalog import ALL_CATEGORIES, CATEGORIES, FilterState, ToolCatalog, apply_filter
from config.settings import Settings, load_settings
from config.tools import TOOLS, category_style
from config.template import HOME_TEMPLATE, TOOLS_TEMPLATE, TOOL_PAGE_TEMPLATE
from blueprints.catalog import catalog_bp


def build_catalog(settings: Settings) -> ToolCatalog:
    """Build the static tool catalog, leaving out tools disabled in config"""
    return ToolCatalog.from_records(TOOLS, enabled=settings.is_tool_enabled)


def create_app(settings: Settings = None) -> Flask:
    app = Flask(__name__)

    if settings is None:
        settings = load_settings()
    tool_catalog = build_catalog(settings)

    app.config['SETTINGS'] = settings
    app.config['TOOL_CATALOG'] = tool_catalog
    app.register_blueprint(catalog_bp)

    # The catalog never changes, so the menu is grouped once at startup
    tool_catalog.menu(settings.preview_limit)
    app.logger.info("Tool catalog ready: %d tools in %d categories",
                    tool_catalog.count(), len(CATEGORIES))

    @app.context_processor
    def inject_navigation():
        return {
            'menu': tool_catalog.menu(settings.preview_limit),
            'total': tool_catalog.count(),
            'category_style': category_style
        }

    @app.route('/')
    def home():
        return render_template_string(HOME_TEMPLATE, featured=tool_catalog.featured(settings.featured))

    @app.route('/tools')
    def tools_page():
        state = FilterState.from_args(request.args)
        result = apply_filter(tool_catalog, state)
        chips = [{'id': ALL_CATEGORIES, 'label': category_style(ALL_CATEGORIES)['label']}]
        chips.extend({'id': category, 'label': category_style(category)['label']} for category in CATEGORIES)
        return render_template_string(TOOLS_TEMPLATE,
                                      page_title='Developer Tools - DevToolkit',
                                      state=state,
                                      result=result,
                                      chips=chips,
                                      tag_preview_limit=settings.tag_preview_limit)

    # Tool Routes
    @app.route('/tools/<tool_name>')
    def serve_tool(tool_name):
        tool = tool_catalog.get_by_slug(tool_name)
        if not tool:
            abort(404)
        return render_template_string(TOOL_PAGE_TEMPLATE,
                                      page_title=f'{tool.name} - DevToolkit',
                                      tool=tool)

    @app.route('/health')
    def health():
        return jsonify({
            'status': 'healthy',
            'timestamp': datetime.now().isoformat(),
            'tools_count': tool_catalog.count()
        })

    return app


app = create_app()


if __name__ == '__main__':
    app.run(debug=True, host='127.0.0.1', port=8000)
