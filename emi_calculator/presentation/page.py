"""HTML rendering of the calculator page"""

from jinja2 import Environment

from emi_calculator.domain.models import FormState, FormStatus
from emi_calculator.presentation.formatting import format_currency

INPUTS = [
    # (name, label, input type, min, step)
    ("principal", "Loan Amount (P)", "number", "0", "any"),
    ("annual_rate", "Annual Rate (%) (R)", "number", "0", "any"),
    ("tenure", "Loan Tenure (in months) (N)", "text", "1", "1"),
]

PAGE_TEMPLATE = r"""
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>EMI Calculator</title>
  <style>
    body{font-family:system-ui,sans-serif;background:#f3f4f6;margin:0;padding:1rem}
    .card{max-width:42rem;margin:2rem auto;background:#fff;border-radius:.75rem;padding:2rem;box-shadow:0 10px 25px rgba(0,0,0,.15)}
    h1{color:#4338ca;text-align:center}
    .grid{display:grid;grid-template-columns:1fr 1fr;gap:1.5rem}
    @media(max-width:768px){.grid{grid-template-columns:1fr}}
    label{display:block;font-size:.875rem;color:#374151;margin-bottom:.5rem}
    input{width:100%;box-sizing:border-box;padding:.75rem;font-size:1.1rem;border:2px solid #d1d5db;border-radius:.5rem}
    input:focus{outline:none;border-color:#6366f1;box-shadow:0 0 0 4px #c7d2fe}
    button{width:100%;margin-top:2rem;padding:1rem;font-size:1.1rem;font-weight:700;color:#fff;background:#4f46e5;border:0;border-radius:.75rem;cursor:pointer}
    .error{margin-top:1.5rem;padding:1rem;background:#fee2e2;border-left:4px solid #ef4444;color:#b91c1c;border-radius:.5rem}
    .row{display:flex;justify-content:space-between;align-items:center;padding:1rem;margin-top:1rem;border-radius:.5rem;background:#f9fafb}
    .row.emi{background:#eef2ff;border-left:4px solid #4f46e5;font-size:1.25rem}
    .row.interest{background:#fefce8;border-left:4px solid #eab308}
    .row.total{background:#f0fdf4;border-left:4px solid #16a34a}
  </style>
</head>
<body>
<div class="card">
  <h1>Equated Monthly Instalment (EMI) Calculator</h1>
  <form method="post" action="/">
    <div class="grid">
      {% for name, label, type, min, step in inputs %}
      <div>
        <label for="{{ name }}">{{ label }}</label>
        <input id="{{ name }}" name="{{ name }}" type="{{ type }}" min="{{ min }}" step="{{ step }}"
               value="{{ fields[name] }}" placeholder="{{ label }}" aria-label="{{ label }}">
      </div>
      {% endfor %}
    </div>
    <button type="submit">Calculate EMI</button>
  </form>

  {% if error %}
  <div class="error outcome" role="alert"><p>{{ error }}</p></div>
  {% endif %}

  {% if rows %}
  <div class="results outcome">
    <h2>Results</h2>
    {% for css, label, value in rows %}
    <div class="row {{ css }}"><span>{{ label }}</span><strong>{{ value }}</strong></div>
    {% endfor %}
  </div>
  {% endif %}
</div>
<script>
  // Editing a field drops the previous outcome
  document.querySelectorAll("input").forEach(function (el) {
    el.addEventListener("input", function () {
      document.querySelectorAll(".outcome").forEach(function (panel) { panel.remove(); });
    });
  });
</script>
</body>
</html>
"""

_env = Environment(autoescape=True)
_template = _env.from_string(PAGE_TEMPLATE)


def result_rows(state: FormState, currency_symbol: str = "$") -> list[tuple[str, str, str]]:
    """Labelled, formatted figures for the results panel"""
    if state.status is not FormStatus.SUCCESS or state.result is None:
        return []

    result = state.result
    return [
        ("principal", "Total Loan Amount (P)", format_currency(result.principal, currency_symbol)),
        ("emi", "Equated Monthly Instalment (EMI)", format_currency(result.installment, currency_symbol)),
        ("interest", "Total Interest to be Paid", format_currency(result.total_interest, currency_symbol)),
        ("total", "Total Payment (P + Interest)", format_currency(result.total_payment, currency_symbol)),
    ]


def render_page(state: FormState, currency_symbol: str = "$") -> str:
    """Render the whole calculator page for the given form state"""
    fields = state.fields
    return _template.render(
        inputs=INPUTS,
        fields={
            "principal": fields.principal,
            "annual_rate": fields.annual_rate,
            "tenure": fields.tenure,
        },
        error=state.error if state.status is FormStatus.ERROR else None,
        rows=result_rows(state, currency_symbol),
    )
