"""Registry of term forms for the Rinha evaluator.

Maps each Term class to the handler implementing its evaluation rule. The
evaluator dispatches on the exact type of the node being evaluated.
"""

from rinha.types import terms
from rinha.evaluation.forms.literal_forms import bool_form, int_form, str_form
from rinha.evaluation.forms.print_form import print_form
from rinha.evaluation.forms.binary_form import binary_form
from rinha.evaluation.forms.if_form import if_form
from rinha.evaluation.forms.tuple_forms import tuple_form, first_form, second_form
from rinha.evaluation.forms.var_form import var_form
from rinha.evaluation.forms.let_form import let_form
from rinha.evaluation.forms.function_form import function_form
from rinha.evaluation.forms.call_form import call_form

TERM_FORMS = {
    terms.Bool: bool_form,
    terms.Int: int_form,
    terms.Str: str_form,
    terms.Print: print_form,
    terms.Binary: binary_form,
    terms.If: if_form,
    terms.Tuple: tuple_form,
    terms.First: first_form,
    terms.Second: second_form,
    terms.Var: var_form,
    terms.Let: let_form,
    terms.Function: function_form,
    terms.Call: call_form,
}
