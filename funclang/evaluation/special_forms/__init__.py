"""Registry of forms for the FuncLang evaluator.

Maps head Symbols to handler functions. Every primitive of the language is
a form: the evaluator consults this table before treating a list as a
function application.
"""

from funclang.types.symbol import Symbol
from funclang.evaluation.special_forms.arith_forms import add_form, sub_form, mul_form, div_form
from funclang.evaluation.special_forms.compare_forms import less_form, greater_form, equal_form
from funclang.evaluation.special_forms.if_form import if_form
from funclang.evaluation.special_forms.let_form import let_form
from funclang.evaluation.special_forms.define_form import define_form
from funclang.evaluation.special_forms.lambda_form import lambda_form
from funclang.evaluation.special_forms.list_forms import cons_form, car_form, cdr_form, list_form, unit_form
from funclang.evaluation.special_forms.predicate_forms import (
    null_form,
    pair_form,
    list_p_form,
    number_form,
    boolean_form,
    string_form,
    procedure_form,
    unit_p_form,
)
from funclang.evaluation.special_forms.eval_form import eval_form
from funclang.evaluation.special_forms.read_form import read_form

SPECIAL_FORMS = {
    Symbol("+"): add_form,
    Symbol("-"): sub_form,
    Symbol("*"): mul_form,
    Symbol("/"): div_form,
    Symbol("<"): less_form,
    Symbol(">"): greater_form,
    Symbol("="): equal_form,
    Symbol("if"): if_form,
    Symbol("let"): let_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("cons"): cons_form,
    Symbol("car"): car_form,
    Symbol("cdr"): cdr_form,
    Symbol("list"): list_form,
    Symbol("unit"): unit_form,
    Symbol("null?"): null_form,
    Symbol("pair?"): pair_form,
    Symbol("list?"): list_p_form,
    Symbol("number?"): number_form,
    Symbol("boolean?"): boolean_form,
    Symbol("string?"): string_form,
    Symbol("procedure?"): procedure_form,
    Symbol("unit?"): unit_p_form,
    Symbol("eval"): eval_form,
    Symbol("read"): read_form,
}
