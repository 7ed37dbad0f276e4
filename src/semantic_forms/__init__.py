"""
Semantic Form Helpers

Standardized form elements for HTML views.

Every field rendered through this package is placed inside a
"definition pair": the label lives in a definition term (<dt>) and the
field itself in definition data (<dd>), so all forms share one
consistent, valid markup structure:

    <dl class="standard-form">
        <dt><label for="login">Login:</label></dt>
        <dd><input type="text" name="login" id="login" /></dd>
    </dl>

LAYERS:
-------
    inflection        - name -> label / id conversions
    tags              - plain tag generators (text_field_tag, select_tag, ...)
    form_builder      - FormBuilder contract, form_for / fields_for
    helpers           - semantic_* decorators over the tag generators
    semantic_builder  - StandardBuilder used by the semantic block helpers

None of the semantic helpers replace the plain ones; they add a
"standard" set on top.
"""

__version__ = "0.1.0"
