# email_template.py
"""
Welcome email for new beta users.

compose() is pure templating: it takes a SubmissionRecord (defaults already
applied) and the issued key, and returns the subject plus HTML and plain-text
bodies. No network or storage access happens here.
"""

from typing import NamedTuple

from jinja2 import Environment

SUBJECT = "🌙 Welcome to Lunar Landing API Beta - Your API Key Inside"

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

# ── HTML template ─────────────────────────────────────────────────────────────
WELCOME_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <style>
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .header { background: linear-gradient(135deg, #0a0e27 0%, #1a1f3a 100%); color: white; padding: 30px 20px; text-align: center; border-radius: 8px 8px 0 0; }
    .content { background: #ffffff; padding: 30px; border: 1px solid #e0e0e0; }
    .api-key-box { background: #f8f9fa; border: 2px solid #4CAF50; border-radius: 8px; padding: 20px; margin: 20px 0; text-align: center; }
    .api-key { font-family: 'Courier New', monospace; font-size: 16px; font-weight: bold; color: #2e7d32; word-break: break-all; background: #e8f5e9; padding: 10px; border-radius: 4px; }
    .code-block { background: #0a0e27; color: #e0e0e0; padding: 20px; border-radius: 8px; font-family: 'Courier New', monospace; font-size: 14px; white-space: pre; }
    .btn { display: inline-block; background: #4CAF50; color: white; padding: 12px 30px; text-decoration: none; border-radius: 6px; margin: 10px 0; }
    .warning { background: #fff3cd; border-left: 4px solid #ffc107; padding: 15px; margin: 20px 0; }
    .footer { text-align: center; padding: 20px; color: #666; font-size: 14px; }
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1>🌙 Welcome to Lunar Landing API</h1>
      <p>Your beta access is ready!</p>
    </div>

    <div class="content">
      <p>Hi {{ greeting_name }},</p>

      <p>Thank you for joining the Lunar Landing Site API beta program! We're excited to have you in our early community of lunar mission planners, researchers, and space enthusiasts.</p>

      <h2>🔑 Your API Key</h2>
      <div class="api-key-box">
        <p>Your Personal API Key:</p>
        <div class="api-key">{{ api_key }}</div>
        <p>⚠️ Keep this secure - don't share it publicly</p>
      </div>

      <div class="warning">
        <strong>Important:</strong> Treat your API key like a password. Never commit it to public repositories or share it in forums. Store it in environment variables.
      </div>

      <h2>🚀 Quick Start Guide</h2>
      <p>Get started in 60 seconds:</p>

      <h3>1. Make Your First API Call</h3>
      <div class="code-block"># Find top 5 landing sites near the lunar south pole
import requests

response = requests.get(
    "{{ base_url }}/api/v1/recommendations",
    headers={"X-API-Key": "{{ api_key }}"},
    params={
        "lat": -89.5,
        "lon": 0,
        "mission_type": "artemis",
        "top_n": 5
    }
)

print(response.json())</div>

      <h3>2. Explore the API</h3>
      <p>Our interactive documentation has everything you need:</p>
      <ul>
        <li><strong>Interactive Docs:</strong> <a href="{{ base_url }}/docs">{{ base_url }}/docs</a></li>
        <li><strong>All Endpoints:</strong> Site search, recommendations, statistics, and exports</li>
        <li><strong>Code Examples:</strong> Python, JavaScript, cURL, and more</li>
        <li><strong>Data Dictionary:</strong> Full description of all 60+ features</li>
      </ul>
      <a href="{{ base_url }}/docs" class="btn">📖 View API Documentation</a>

      <h2>💡 What You Can Do</h2>
      <ul>
        <li><strong>Search 1.18M Sites:</strong> Query by location, terrain, illumination, and more</li>
        <li><strong>Get AI Recommendations:</strong> Mission-specific site suggestions with reasoning</li>
        <li><strong>Export Data:</strong> Download as GeoJSON, KML, or CSV for GIS tools</li>
        <li><strong>Analyze Terrain:</strong> Access 60+ features per site (slope, roughness, illumination, etc.)</li>
      </ul>

      <h2>📊 Your Beta Profile</h2>
      <p><strong>Organization:</strong> {{ user.organization }}</p>
      {% if user.role %}
      <p><strong>Role:</strong> {{ user.role }}</p>
      {% endif %}
      <p><strong>Your Use Case:</strong> {{ user.use_case }}</p>
      <p><strong>How you heard about us:</strong> {{ user.source }}</p>
      <p><strong>Rate Limits:</strong> 100 requests/day</p>
      <p><strong>Support:</strong> Reply to this email or contact <a href="mailto:{{ support_email }}">{{ support_email }}</a></p>

      <h2>🤝 Help Us Improve</h2>
      <p>As a beta user, your feedback is invaluable! Please let us know:</p>
      <ul>
        <li>What features you'd like to see</li>
        <li>Any bugs or issues you encounter</li>
        <li>How the API fits into your workflow</li>
        <li>Documentation improvements</li>
      </ul>

      <h2>📚 Helpful Resources</h2>
      <ul>
        <li><strong>Tutorial:</strong> <a href="{{ base_url }}/docs/tutorial">Getting Started Guide</a></li>
        <li><strong>Examples:</strong> <a href="{{ base_url }}/docs/examples">Real-world use cases</a></li>
        <li><strong>Data Sources:</strong> NASA LOLA (terrain) + LROC (illumination)</li>
      </ul>

      <p>Ready to find the perfect lunar landing site? Start exploring now!</p>

      <a href="{{ base_url }}/docs" class="btn">🌙 Start Using the API</a>

      <p>Best regards,<br>
      <strong>{{ from_name }}</strong><br>
      {{ company_name }}</p>
    </div>

    <div class="footer">
      <p>🌙 Lunar Landing Site API - Beta Program</p>
      <p>Built with data from NASA Lunar Reconnaissance Orbiter</p>
      <p>
        Questions? Reply to this email or contact <a href="mailto:{{ support_email }}">{{ support_email }}</a>
      </p>
    </div>
  </div>
</body>
</html>
"""

WELCOME_TEXT = """Hi {{ greeting_name }},

Thank you for joining the Lunar Landing Site API beta program!

Your API key: {{ api_key }}
Treat it like a password and keep it out of public repositories.

Base URL: {{ base_url }}
Documentation: {{ base_url }}/docs

Your use case: {{ user.use_case }}

Best regards,
{{ from_name }}
"""

_html = _env.from_string(WELCOME_HTML)
# plain text, no escaping
_text = Environment(autoescape=False).from_string(WELCOME_TEXT)


class WelcomeEmail(NamedTuple):
    subject: str
    html_body: str
    text_body: str


def compose(user, api_key, settings):
    context = {
        "user": user,
        "greeting_name": user.first_name or "there",
        "api_key": api_key,
        "base_url": settings.api_base_url,
        "from_name": settings.from_name,
        "support_email": settings.support_email,
        "company_name": settings.company_name,
    }
    return WelcomeEmail(SUBJECT, _html.render(context), _text.render(context))
