from lark import Lark

hornlexer = Lark(r"""
    %import common.WS
    %ignore WS

    ?statement : rule | fact

    fact : predicate "."?
    rule : predicate ":-" body "."?
         | predicate ":-" "."
    body : predicate ("," predicate)*

    query : "?-"? predicate "."?

    predicate : NAME "(" arguments? ")"
    arguments : ARGUMENT ("," ARGUMENT)*

    NAME : /\w+/
    // Inner spaces and dots are part of the argument; colons never are
    ARGUMENT : /[^\s,():]+(?:[ \t]+[^\s,():]+)*/
""", start=["statement", "query"], parser="lalr")
