def is_variable(term):
    """Variables are written with an uppercase first letter."""
    if isinstance(term, Term):
        return isinstance(term, Variable)
    return bool(term) and term[0].isupper()


class Term:
    def __init__(self, name):
        if not isinstance(name, str) or not name:
            raise TypeError(f"Expected non-empty string, got {name!r}")
        self.name = name

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return self.name == other.name

    def __hash__(self):
        if not hasattr(self, 'hash'):
            self.hash = hash((type(self).__name__, self.name))
        return self.hash

    def __repr__(self):
        return self.name


class Constant(Term):
    pass


class Variable(Term):
    pass


def make_term(text):
    """Classify a raw argument token as a Variable or a Constant."""
    if isinstance(text, Term):
        return text
    if is_variable(text):
        return Variable(text)
    return Constant(text)


class Predicate:
    @staticmethod
    def check(name, args):
        if not isinstance(name, str) or not name:
            raise TypeError(f"Expected non-empty predicate name, got {name!r}")
        for arg in args:
            if not isinstance(arg, Term):
                raise TypeError(f"Expected Term, got {arg!r}")

    def __init__(self, name, args=()):
        args = tuple(make_term(arg) if isinstance(arg, str) else arg for arg in args)
        Predicate.check(name, args)
        self.name = name
        self.args = args

    @property
    def arity(self):
        return len(self.args)

    def variables(self):
        return {arg for arg in self.args if isinstance(arg, Variable)}

    def is_ground(self):
        return not self.variables()

    def __eq__(self, other):
        if not isinstance(other, Predicate):
            return False
        return self.name == other.name and self.args == other.args

    def __hash__(self):
        if not hasattr(self, 'hash'):
            self.hash = hash((self.name, self.args))
        return self.hash

    def __repr__(self):
        return f"{self.name}({', '.join(map(str, self.args))})"


class Clause:
    """Common base of facts and rules."""

    @property
    def name(self):
        return self.head.name

    def variables(self):
        variables = set()
        for predicate in self.predicates():
            variables |= predicate.variables()
        return variables

    def predicates(self):
        raise NotImplementedError


class Fact(Clause):
    def __init__(self, predicate):
        if not isinstance(predicate, Predicate):
            raise TypeError(f"Expected Predicate, got {predicate!r}")
        self.predicate = predicate

    @property
    def head(self):
        return self.predicate

    def predicates(self):
        return (self.predicate,)

    def __eq__(self, other):
        if not isinstance(other, Fact):
            return False
        return self.predicate == other.predicate

    def __hash__(self):
        return hash(('fact', self.predicate))

    def __repr__(self):
        return f"{self.predicate}."


class Rule(Clause):
    @staticmethod
    def check(head, body):
        if not isinstance(head, Predicate):
            raise TypeError(f"Expected Predicate, got {head!r}")
        for predicate in body:
            if not isinstance(predicate, Predicate):
                raise TypeError(f"Expected Predicate, got {predicate!r}")

    def __init__(self, head, body=()):
        body = tuple(body)
        Rule.check(head, body)
        self.head = head
        self.body = body

    def predicates(self):
        return (self.head, *self.body)

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return False
        return self.head == other.head and self.body == other.body

    def __hash__(self):
        return hash(('rule', self.head, self.body))

    def __repr__(self):
        if not self.body:
            return f"{self.head} :- ."
        return f"{self.head} :- {', '.join(map(str, self.body))}."
