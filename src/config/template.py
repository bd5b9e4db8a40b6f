# Shared page head, styles and navigation mega-menu
PAGE_HEAD = '''
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ page_title or "DevToolkit" }}</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            color: #333;
        }
        a {
            color: inherit;
            text-decoration: none;
        }
        .nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            padding: 15px 30px;
            background: rgba(255, 255, 255, 0.95);
            box-shadow: 0 4px 15px rgba(0,0,0,0.1);
        }
        .nav .brand {
            font-weight: 600;
            font-size: 1.3em;
            color: #4c51bf;
        }
        .nav-links {
            display: flex;
            gap: 20px;
            align-items: center;
        }
        .dropdown {
            position: relative;
        }
        .dropdown-content {
            display: none;
            position: absolute;
            right: 0;
            width: 600px;
            background: white;
            border-radius: 15px;
            padding: 20px;
            box-shadow: 0 15px 35px rgba(0,0,0,0.15);
            z-index: 10;
        }
        .dropdown:hover .dropdown-content {
            display: block;
        }
        .menu-grid {
            display: grid;
            grid-template-columns: repeat(2, 1fr);
            gap: 15px;
            margin: 15px 0;
        }
        .menu-section {
            border-radius: 10px;
            padding: 12px;
            border-left: 4px solid #667eea;
            background: #f7fafc;
        }
        .menu-section h4 {
            font-size: 0.95em;
            margin-bottom: 2px;
        }
        .menu-section small {
            color: #718096;
        }
        .menu-section a {
            display: block;
            font-size: 0.85em;
            padding: 4px 0;
        }
        .menu-section .more {
            color: #718096;
        }
        .header {
            text-align: center;
            padding: 40px 20px;
            color: white;
        }
        .header h1 {
            font-size: 3em;
            margin-bottom: 10px;
            font-weight: 300;
            text-shadow: 0 2px 4px rgba(0,0,0,0.3);
        }
        .header p {
            font-size: 1.2em;
            opacity: 0.9;
        }
        .container {
            max-width: 1200px;
            margin: 0 auto;
            padding: 0 20px;
        }
        .search-container {
            margin-bottom: 20px;
        }
        .search-box {
            width: 100%;
            max-width: 500px;
            margin: 0 auto;
            display: block;
            padding: 15px 20px;
            font-size: 16px;
            border: none;
            border-radius: 50px;
            background: rgba(255, 255, 255, 0.95);
            box-shadow: 0 4px 15px rgba(0,0,0,0.1);
            outline: none;
        }
        .chips, .active-filters, .summary {
            display: flex;
            flex-wrap: wrap;
            justify-content: center;
            gap: 8px;
            margin-bottom: 20px;
            color: white;
        }
        .chip {
            padding: 6px 16px;
            border-radius: 20px;
            border: 1px solid rgba(255,255,255,0.6);
            color: white;
            font-size: 0.9em;
        }
        .chip.selected {
            background: white;
            color: #2d3748;
        }
        .tools-grid {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
            gap: 20px;
            margin-bottom: 40px;
        }
        .tool-card {
            display: block;
            background: white;
            border-radius: 15px;
            padding: 25px;
            box-shadow: 0 8px 25px rgba(0,0,0,0.1);
            transition: all 0.3s ease;
            position: relative;
            overflow: hidden;
        }
        .tool-card:hover {
            transform: translateY(-8px);
            box-shadow: 0 15px 35px rgba(0,0,0,0.15);
        }
        .tool-card h3 {
            color: #2d3748;
            margin-bottom: 10px;
            font-size: 1.3em;
            font-weight: 600;
        }
        .tool-card p {
            color: #718096;
            line-height: 1.5;
            margin-bottom: 15px;
        }
        .tool-tags {
            display: flex;
            flex-wrap: wrap;
            gap: 8px;
        }
        .tag {
            background: #e3f2fd;
            color: #1565c0;
            padding: 4px 12px;
            border-radius: 20px;
            font-size: 0.8em;
            font-weight: 500;
        }
        .tag.overflow {
            background: white;
            border: 1px solid #cbd5e0;
            color: #4a5568;
        }
        .no-results {
            text-align: center;
            padding: 60px 20px;
            color: white;
        }
        .no-results h3 {
            font-size: 2em;
            margin-bottom: 15px;
            font-weight: 300;
        }
        .clear-btn {
            display: inline-block;
            margin-top: 15px;
            background: rgba(255,255,255,0.2);
            color: white;
            border: 2px solid rgba(255,255,255,0.3);
            padding: 12px 30px;
            border-radius: 50px;
        }
        .tool-shell {
            background: white;
            border-radius: 15px;
            padding: 40px;
            box-shadow: 0 8px 25px rgba(0,0,0,0.1);
            margin-bottom: 40px;
            color: #4a5568;
        }
        .footer {
            text-align: center;
            padding: 20px;
            color: rgba(255,255,255,0.7);
        }
    </style>
</head>
<body>
    <nav class="nav">
        <a class="brand" href="/">🧰 DevToolkit</a>
        <div class="nav-links">
            <a href="/">Home</a>
            <div class="dropdown">
                <a href="/tools">Tools ▾</a>
                <div class="dropdown-content" id="toolsMenu">
                    <a href="/tools">
                        <strong>All Developer Tools</strong><br>
                        <small>Browse our complete collection of {{ total }} tools</small>
                    </a>
                    <div class="menu-grid">
                        {% for group in menu %}
                        <div class="menu-section" style="border-left-color: {{ category_style(group.category).color }}">
                            <h4>{{ category_style(group.category).icon }} {{ group.category }}</h4>
                            <small>{{ group.total }} tools</small>
                            {% for tool in group.tools %}
                            <a href="{{ tool.route }}">{{ tool.icon }} {{ tool.label }}</a>
                            {% endfor %}
                            {% if group.overflow > 0 %}
                            <a class="more" href="/tools?category={{ group.category | urlencode }}">+{{ group.overflow }} more...</a>
                            {% endif %}
                        </div>
                        {% endfor %}
                    </div>
                    <a href="/tools"><strong>Explore All {{ total }} Tools →</strong></a>
                </div>
            </div>
        </div>
    </nav>
'''

PAGE_FOOT = '''
    <div class="footer">
        <p>DevToolkit - Developer Utilities | Built with Flask</p>
    </div>
</body>
</html>
'''

# Home page with featured tools
HOME_TEMPLATE = PAGE_HEAD + '''
    <div class="header">
        <h1>DevToolkit</h1>
        <p>Essential developer utilities, all in one place</p>
    </div>

    <div class="container">
        <div class="tools-grid">
            {% for tool in featured %}
            <a class="tool-card" href="{{ tool.route }}">
                <h3>{{ tool.icon }} {{ tool.name }}</h3>
                <p>{{ tool.description }}</p>
            </a>
            {% endfor %}
        </div>
        <div class="summary">
            <a class="clear-btn" href="/tools">Explore all {{ total }} tools</a>
        </div>
    </div>
''' + PAGE_FOOT

# Tools listing page with search and category filters
TOOLS_TEMPLATE = PAGE_HEAD + '''
    <div class="header">
        <h1>Developer Tools</h1>
        <p>Comprehensive suite of utilities designed to streamline your development workflow</p>
    </div>

    <div class="container">
        <form class="search-container" method="get" action="/tools">
            <input type="text" class="search-box" placeholder="Search tools..." id="searchInput" name="q" value="{{ state.query }}">
            <input type="hidden" name="category" id="categoryInput" value="{{ state.category }}">
        </form>

        <div class="chips">
            {% for chip in chips %}
            <a class="chip {% if chip.id == state.category %}selected{% endif %}" data-category="{{ chip.id }}"
               href="/tools?category={{ chip.id | urlencode }}&q={{ state.query | urlencode }}">{{ chip.label }}</a>
            {% endfor %}
        </div>

        <div class="active-filters" id="activeFilters" {% if not state.is_active %}style="display: none"{% endif %}>
            <span>Active filters:</span>
            <span class="chip" id="queryBadge" {% if not state.query %}style="display: none"{% endif %}>Search: &quot;<span id="queryBadgeText">{{ state.query }}</span>&quot;</span>
            {% if state.category != 'all' %}<span class="chip">Category: {{ category_style(state.category).label }}</span>{% endif %}
            <a class="chip" href="/tools">Clear all</a>
        </div>

        <div class="summary">
            <p id="resultCount">Showing {{ result.shown }} of {{ result.total }} tools</p>
        </div>

        <div class="tools-grid" id="toolsGrid">
            {% for tool in result.tools %}
            {% set preview = tool.tag_preview(tag_preview_limit) %}
            <a class="tool-card" href="{{ tool.route }}">
                <h3>{{ tool.icon }} {{ tool.name }}</h3>
                <p>{{ tool.description }}</p>
                <div class="tool-tags">
                    {% for tag in preview[0] %}
                    <span class="tag">{{ tag }}</span>
                    {% endfor %}
                    {% if preview[1] > 0 %}
                    <span class="tag overflow">+{{ preview[1] }}</span>
                    {% endif %}
                </div>
            </a>
            {% endfor %}
        </div>

        <div class="no-results" id="noResults" {% if not result.is_empty %}style="display: none"{% endif %}>
            <h3>No tools found</h3>
            <p>Try adjusting your search terms or filters</p>
            <a class="clear-btn" href="/tools">Clear filters</a>
        </div>
    </div>

    <script>
        const tagPreviewLimit = {{ tag_preview_limit }};

        function escapeHtml(text) {
            const div = document.createElement('div');
            div.textContent = text;
            return div.innerHTML;
        }

        function renderTools(data) {
            const grid = document.getElementById('toolsGrid');
            grid.innerHTML = data.tools.map(tool => {
                const visible = tool.tags.slice(0, tagPreviewLimit);
                const hidden = tool.tags.length - visible.length;
                const tags = visible.map(tag => `<span class="tag">${escapeHtml(tag)}</span>`).join('');
                const more = hidden > 0 ? `<span class="tag overflow">+${hidden}</span>` : '';
                return `<a class="tool-card" href="${tool.route}">
                    <h3>${tool.icon} ${escapeHtml(tool.name)}</h3>
                    <p>${escapeHtml(tool.description)}</p>
                    <div class="tool-tags">${tags}${more}</div>
                </a>`;
            }).join('');
            document.getElementById('resultCount').textContent = `Showing ${data.shown} of ${data.total} tools`;
            document.getElementById('noResults').style.display = data.shown === 0 ? 'block' : 'none';
        }

        function updateFilters(query, category) {
            document.querySelectorAll('.chips .chip').forEach(chip => {
                const params = new URLSearchParams({category: chip.dataset.category, q: query});
                chip.href = `/tools?${params}`;
            });
            document.getElementById('queryBadgeText').textContent = query;
            document.getElementById('queryBadge').style.display = query !== '' ? '' : 'none';
            document.getElementById('activeFilters').style.display =
                query !== '' || category !== 'all' ? '' : 'none';
            history.replaceState(null, '', `/tools?${new URLSearchParams({category: category, q: query})}`);
        }

        // Only the response to the latest keystroke is rendered
        let latestRequest = 0;

        // Search functionality
        document.getElementById('searchInput').addEventListener('input', function(e) {
            const query = e.target.value;
            const category = document.getElementById('categoryInput').value;
            const requestId = ++latestRequest;
            updateFilters(query, category);
            fetch(`/api/tools?${new URLSearchParams({q: query, category: category})}`)
                .then(response => response.json())
                .then(data => {
                    if (requestId === latestRequest) {
                        renderTools(data);
                    }
                });
        });
    </script>
''' + PAGE_FOOT

# Shell page for a single tool
TOOL_PAGE_TEMPLATE = PAGE_HEAD + '''
    <div class="header">
        <h1>{{ tool.icon }} {{ tool.name }}</h1>
        <p>{{ tool.description }}</p>
    </div>

    <div class="container">
        <div class="tool-shell">
            <p>Category: <a href="/tools?category={{ tool.category | urlencode }}">{{ category_style(tool.category).label }}</a></p>
            <div class="tool-tags">
                {% for tag in tool.tags %}
                <span class="tag">{{ tag }}</span>
                {% endfor %}
            </div>
        </div>
    </div>
''' + PAGE_FOOT
