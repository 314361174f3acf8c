"""Registry of special forms for the scopeval evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Every handler takes `(tail, env, evaluate_fn)`.
"""

from scopeval.types.symbol import Symbol
from scopeval.evaluation.special_forms.quote_forms import quote_form, syntax_quote_form, unquote_form, unquote_splice_form
from scopeval.evaluation.special_forms.if_form import if_form, when_form
from scopeval.evaluation.special_forms.do_form import do_form
from scopeval.evaluation.special_forms.let_form import let_form
from scopeval.evaluation.special_forms.fn_form import fn_form
from scopeval.evaluation.special_forms.def_form import def_form, defn_form
from scopeval.evaluation.special_forms.logic_forms import and_form, or_form
from scopeval.evaluation.special_forms.eval_form import eval_form
from scopeval.evaluation.special_forms.thread_forms import thread_first_form, thread_last_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("syntax-quote"): syntax_quote_form,
    Symbol("unquote"): unquote_form,
    Symbol("unquote-splicing"): unquote_splice_form,
    Symbol("if"): if_form,
    Symbol("when"): when_form,
    Symbol("do"): do_form,
    Symbol("let"): let_form,
    Symbol("fn"): fn_form,
    Symbol("def"): def_form,
    Symbol("defn"): defn_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("eval"): eval_form,
    Symbol("->"): thread_first_form,
    Symbol("->>"): thread_last_form,
}
