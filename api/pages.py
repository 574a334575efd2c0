"""
HTML documentation page served at ``/``.

Responsibility: Human-readable overview of the API endpoints
"""

from html import escape
from string import Template


_READY_BANNER = '<div class="ready">&#9989; Upstream client ready</div>'
_NOT_READY_BANNER = (
    '<div class="warning"><strong>&#9888;&#65039; Warning:</strong> '
    'Upstream client is not ready. API endpoints may not work yet.</div>'
)

_PAGE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>$title</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background: #f5f5f5;
        }
        .container {
            background: white;
            padding: 30px;
            border-radius: 10px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
        }
        h1 { color: #2c3e50; }
        .endpoint {
            background: #f8f9fa;
            padding: 15px;
            margin: 10px 0;
            border-radius: 5px;
            border-left: 4px solid #007bff;
        }
        .method {
            background: #007bff;
            color: white;
            padding: 3px 8px;
            border-radius: 3px;
            font-size: 12px;
            font-weight: bold;
        }
        code {
            background: #e9ecef;
            padding: 2px 4px;
            border-radius: 3px;
            font-family: 'Monaco', 'Courier New', monospace;
        }
        .example {
            background: #e8f5e8;
            padding: 10px;
            border-radius: 5px;
            margin-top: 10px;
        }
        .ready { color: green; }
        .warning {
            background: #fff3cd;
            border: 1px solid #ffeaa7;
            color: #856404;
            padding: 15px;
            border-radius: 5px;
            margin: 15px 0;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>&#127963;&#65039; $title</h1>
        <p>This backend service provides access to Dutch Parliament attendance data without CORS restrictions.</p>

        $banner

        <h2>Available Endpoints</h2>

        <div class="endpoint">
            <span class="method">GET</span> <code>/api/attendance</code>
            <p>Get attendance data with optional filters</p>
            <strong>Query Parameters:</strong>
            <ul>
                <li><code>dateFrom</code> - Start date (YYYY-MM-DD)</li>
                <li><code>dateTo</code> - End date (YYYY-MM-DD)</li>
                <li><code>activityType</code> - Filter by activity type</li>
                <li><code>limit</code> - Max results (default: $default_limit)</li>
                <li><code>skip</code> - Skip results for pagination (default: 0)</li>
            </ul>
            <div class="example">
                <strong>Example:</strong><br>
                <code>/api/attendance?dateFrom=2024-01-01&amp;dateTo=2024-12-31&amp;limit=100</code>
            </div>
        </div>

        <div class="endpoint">
            <span class="method">GET</span> <code>/api/activity/{id}</code>
            <p>Get detailed information about a specific activity</p>
            <div class="example">
                <strong>Example:</strong><br>
                <code>/api/activity/a7fbfbe6-48ee-4182-b9ed-f49d34be4eab</code>
            </div>
        </div>

        <div class="endpoint">
            <span class="method">GET</span> <code>/api/stats</code>
            <p>Get statistics about activities and attendance (based on a sample of $sample_size activities)</p>
            <strong>Query Parameters:</strong> Same as attendance endpoint, without pagination
            <div class="example">
                <strong>Example:</strong><br>
                <code>/api/stats?dateFrom=2024-01-01&amp;dateTo=2024-12-31</code>
            </div>
        </div>

        <div class="endpoint">
            <span class="method">GET</span> <code>/api/health</code>
            <p>Health check endpoint</p>
        </div>

        <h2>Running the server</h2>
        <ol>
            <li>Install the package: <code>pip install -e .</code></li>
            <li>Run the server: <code>python scripts/run_api.py</code></li>
            <li>Interactive API docs: <code>/docs</code></li>
        </ol>
    </div>
</body>
</html>
""")


def render_index_page(
    title: str,
    ready: bool,
    default_limit: int,
    sample_size: int,
) -> str:
    """Render the documentation page."""
    return _PAGE.substitute(
        title=escape(title),
        banner=_READY_BANNER if ready else _NOT_READY_BANNER,
        default_limit=default_limit,
        sample_size=sample_size,
    )
