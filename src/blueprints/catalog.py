from flask import Blueprint, request, jsonify, current_app

from catalog import ALL_CATEGORIES, CATEGORIES, FilterState, apply_filter
from config.tools import category_style

catalog_bp = Blueprint('catalog', __name__)


def get_catalog():
    return current_app.config['TOOL_CATALOG']


def get_settings():
    return current_app.config['SETTINGS']


@catalog_bp.route('/api/tools', methods=['GET'])
def api_tools():
    """Search the catalog by free text query and category"""
    try:
        state = FilterState.from_args(request.args)
        result = apply_filter(get_catalog(), state)
        return jsonify(result.to_dict())
    except Exception as e:
        current_app.logger.exception("Tool search failed: %s", e)
        return jsonify({'error': 'Internal server error'}), 500


@catalog_bp.route('/api/tools/<slug>', methods=['GET'])
def api_tool(slug):
    tool = get_catalog().get_by_slug(slug)
    if not tool:
        return jsonify({'error': 'Tool not found'}), 404
    return jsonify(tool.to_dict())


@catalog_bp.route('/api/categories', methods=['GET'])
def api_categories():
    """List categories in display order with their tool counts"""
    catalog = get_catalog()
    categories = [{
        'id': ALL_CATEGORIES,
        'label': category_style(ALL_CATEGORIES)['label'],
        'color': category_style(ALL_CATEGORIES)['color'],
        'count': catalog.count()
    }]
    for category in CATEGORIES:
        style = category_style(category)
        categories.append({
            'id': category,
            'label': style['label'],
            'color': style['color'],
            'count': len(catalog.by_category(category))
        })
    return jsonify({'categories': categories})


@catalog_bp.route('/api/menu', methods=['GET'])
def api_menu():
    """Grouped navigation menu"""
    limit = get_settings().preview_limit
    raw_limit = request.args.get('limit')
    if raw_limit is not None:
        try:
            limit = int(raw_limit)
        except ValueError:
            return jsonify({'error': 'limit must be a non-negative integer'}), 400
        if limit < 0:
            return jsonify({'error': 'limit must be a non-negative integer'}), 400

    try:
        catalog = get_catalog()
        groups = catalog.menu(limit)
        return jsonify({
            'groups': [group.to_dict() for group in groups],
            'total': catalog.count(),
            'preview_limit': limit
        })
    except Exception as e:
        current_app.logger.exception("Menu grouping failed: %s", e)
        return jsonify({'error': 'Internal server error'}), 500
