# Store for tools configuration, in listing page display order
TOOLS = [
    {
        "name": "JSON Formatter",
        "description": "Format, validate, and beautify JSON data with syntax highlighting and error detection",
        "route": "/tools/json-formatter",
        "category": "Data",
        "tags": ["json", "format", "validate", "syntax"],
        "icon": "📄"
    },
    {
        "name": "JWT Decoder & Creator",
        "description": "Decode, create, sign, and validate JWT tokens with comprehensive key management support",
        "route": "/tools/jwt-decoder",
        "category": "Security",
        "tags": ["jwt", "token", "decode", "create", "sign", "validate", "security"],
        "icon": "🛡️"
    },
    {
        "name": "Base64 Encoder/Decoder",
        "description": "Encode and decode Base64 strings with ease",
        "route": "/tools/base64",
        "category": "Conversion",
        "tags": ["base64", "encode", "decode", "binary"],
        "icon": "🔐"
    },
    {
        "name": "UUID Generator",
        "description": "Generate universally unique identifiers in various formats with bulk generation support",
        "route": "/tools/uuid-generator",
        "category": "Generators",
        "tags": ["uuid", "generate", "unique", "identifier"],
        "icon": "🆔"
    },
    {
        "name": "Regex Tester",
        "description": "Test and validate regular expressions with live matching and detailed match analysis",
        "route": "/tools/regex-tester",
        "category": "Development",
        "tags": ["regex", "pattern", "match", "test"],
        "icon": "🔍"
    },
    {
        "name": "cURL to JavaScript",
        "description": "Convert cURL commands to JavaScript fetch or axios code snippets instantly",
        "route": "/tools/curl-converter",
        "category": "Development",
        "tags": ["curl", "javascript", "fetch", "axios"],
        "icon": "💻",
        "menu_label": "cURL Converter"
    },
    {
        "name": "Code Diff Viewer",
        "description": "Compare code blocks with line-by-line difference highlighting and analysis",
        "route": "/tools/diff-viewer",
        "category": "Development",
        "tags": ["diff", "compare", "code", "changes"],
        "icon": "📊"
    },
    {
        "name": "Timestamp Converter",
        "description": "Convert Unix timestamps to human-readable dates and vice versa with multiple formats",
        "route": "/tools/timestamp-converter",
        "category": "Conversion",
        "tags": ["timestamp", "unix", "date", "time"],
        "icon": "⏰"
    },
    {
        "name": "YAML ⇄ JSON Converter",
        "description": "Bi-directional conversion between YAML and JSON formats with live preview",
        "route": "/tools/yaml-json-converter",
        "category": "Conversion",
        "tags": ["yaml", "json", "convert", "format"],
        "icon": "🔄",
        "menu_label": "YAML ⇄ JSON"
    },
    {
        "name": "Markdown Previewer",
        "description": "Write markdown and see live rendered preview with syntax highlighting support",
        "route": "/tools/markdown-previewer",
        "category": "Development",
        "tags": ["markdown", "preview", "render", "documentation"],
        "icon": "👁️"
    },
    {
        "name": "Cron Expression Generator",
        "description": "Build cron expressions with intuitive UI and natural language descriptions",
        "route": "/tools/cron-generator",
        "category": "Generators",
        "tags": ["cron", "schedule", "expression", "time"],
        "icon": "📅",
        "menu_label": "Cron Generator"
    },
    {
        "name": "Code Minifier/Prettifier",
        "description": "Minify or beautify JavaScript, JSON, and CSS code with advanced formatting options",
        "route": "/tools/code-formatter",
        "category": "Development",
        "tags": ["minify", "prettify", "format", "javascript", "css"],
        "icon": "⚡",
        "menu_label": "Code Formatter"
    },
    {
        "name": "CSS Gradient Generator",
        "description": "Create beautiful CSS gradients with advanced controls, color stops, and real-time preview",
        "route": "/tools/css-gradient-generator",
        "category": "Design",
        "tags": ["css", "gradient", "design", "colors", "linear", "radial"],
        "icon": "🎨"
    },
    {
        "name": "PX to REM Converter",
        "description": "Convert pixel values to REM units with bulk conversion and customizable base font size",
        "route": "/tools/px-to-rem-converter",
        "category": "Design",
        "tags": ["px", "rem", "convert", "css", "responsive", "units"],
        "icon": "📐"
    },
    {
        "name": "Responsive Design Tester",
        "description": "Test websites across multiple device viewports with synchronized scrolling and screenshots",
        "route": "/tools/responsive-design-tester",
        "category": "Design",
        "tags": ["responsive", "design", "viewport", "mobile", "tablet", "desktop", "testing"],
        "icon": "📱"
    },
    {
        "name": "Color Palette Extractor",
        "description": "Extract dominant colors from images and generate harmonious color palettes",
        "route": "/tools/color-palette",
        "category": "Design",
        "tags": ["color", "palette", "extract", "image", "design", "harmony"],
        "icon": "🎨"
    },
    {
        "name": "HTML Email Tester",
        "description": "Test HTML email rendering across different email clients with responsive design and dark mode",
        "route": "/tools/html-email-tester",
        "category": "Development",
        "tags": ["html", "email", "test", "responsive", "dark mode", "clients"],
        "icon": "📧"
    },
    {
        "name": "Faker Data Generator",
        "description": "Generate realistic fake data for testing, including names, emails, addresses, and Lorem Ipsum",
        "route": "/tools/faker-data-generator",
        "category": "Generators",
        "tags": ["fake", "data", "generator", "testing", "lorem", "names", "emails"],
        "icon": "🎲"
    },
    {
        "name": "SQL Query Generator",
        "description": "Generate SQL queries from natural language descriptions with AI-powered assistance",
        "route": "/tools/sql-query-generator",
        "category": "Development",
        "tags": ["sql", "query", "generator", "database", "ai", "natural language"],
        "icon": "🗄️"
    },
    {
        "name": "Hash Generator & Verifier",
        "description": "Generate MD5, SHA1, SHA256, and SHA512 hashes for text and files with verification",
        "route": "/tools/hash-generator",
        "category": "Security",
        "tags": ["hash", "md5", "sha1", "sha256", "sha512", "verify", "checksum"],
        "icon": "🔐",
        "menu_label": "Hash Generator"
    },
    {
        "name": "Password Generator",
        "description": "Generate secure, customizable passwords with strength analysis and bulk generation",
        "route": "/tools/password-generator",
        "category": "Security",
        "tags": ["password", "generate", "secure", "strength", "random", "security"],
        "icon": "🔑"
    },
    {
        "name": "REST API Client",
        "description": "Test REST APIs with full HTTP method support, headers, and response analysis",
        "route": "/tools/rest-client",
        "category": "API Tools",
        "tags": ["rest", "api", "http", "client", "testing", "postman", "requests"],
        "icon": "🌐"
    },
]

# Presentation lookup for category chips and menu sections
CATEGORY_STYLES = {
    "Data": {"label": "Data Processing", "color": "#3b82f6", "icon": "🧩"},
    "Security": {"label": "Security", "color": "#a855f7", "icon": "🛡️"},
    "Development": {"label": "Development", "color": "#22c55e", "icon": "⚡"},
    "Conversion": {"label": "Conversion", "color": "#f97316", "icon": "🔄"},
    "Generators": {"label": "Generators", "color": "#ec4899", "icon": "🎲"},
    "Design": {"label": "Design & CSS", "color": "#06b6d4", "icon": "🎨"},
    "API Tools": {"label": "API Tools", "color": "#6366f1", "icon": "🌐"},
}

ALL_TOOLS_STYLE = {"label": "All Tools", "color": "#667eea", "icon": "🧰"}

# Tools shown on the home page
FEATURED_ROUTES = [
    "/tools/json-formatter",
    "/tools/jwt-decoder",
    "/tools/css-gradient-generator",
    "/tools/px-to-rem-converter",
    "/tools/responsive-design-tester",
    "/tools/base64",
]


def category_style(category):
    """Presentation entry for a category, 'all' included. Unknown categories get the default style."""
    if category in CATEGORY_STYLES:
        return CATEGORY_STYLES[category]
    return ALL_TOOLS_STYLE
