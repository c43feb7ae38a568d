class Environment:
    """Contains all variable and function bindings. There is exactly one, flat scope: function calls temporarily
    shadow their parameter names in it (see shadow).
    """

    def __init__(self):
        self.bindings = {}

    def get(self, name):
        """Returns the Value bound to name, or None."""
        return self.bindings.get(name)

    def set(self, name, value):
        """Binds name to value and returns the previous Value of name, if any."""
        previous = self.bindings.get(name)
        self.bindings[name] = value
        return previous

    def take(self, name):
        """Removes the binding of name and returns its Value, if any."""
        return self.bindings.pop(name, None)

    def shadow(self, names):
        """Returns a context manager that captures the current bindings of names on entry and restores them on exit,
        even if an error is raised: names that were bound get their previous Value back, and names that weren't are
        removed.
        """
        return Shadow(self, names)

    def __contains__(self, name):
        return name in self.bindings

    def __iter__(self):
        return iter(self.bindings.items())

    def __len__(self):
        return len(self.bindings)


class Shadow:
    """Context manager returned by Environment.shadow. Restoration happens in __exit__ itself, never deferred, so
    that nested shadows are always undone innermost first.
    """

    def __init__(self, env, names):
        self.env = env
        self.names = names
        self.state = []

    def __enter__(self):
        self.state = [(name, self.env.get(name)) for name in self.names]
        return self.env

    def __exit__(self, exc_type, exc_val, exc_tb):
        for name, value in self.state:
            if value is None:
                self.env.take(name)
            else:
                self.env.set(name, value)
        return False
