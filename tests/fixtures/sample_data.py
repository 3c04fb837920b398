"""Sample data objects used in tests.

SampleUser implements the data object interface the validators expect:
per-attribute error lists, attribute labels and a current scenario. It
also defines methods usable as inline validators.
"""

from typing import Any


class SampleUser:
    """Minimal data object with error accumulation and labels."""
    
    labels = {
        "name": "Full Name",
        "email": "Email Address",
        "password": "Password",
        "password_repeat": "Password (again)",
        "age": "Age",
    }
    
    def __init__(self, scenario: str = "insert", **values: Any) -> None:
        self.scenario = scenario
        self.name: Any = None
        self.email: Any = None
        self.password: Any = None
        self.password_repeat: Any = None
        self.age: Any = None
        self.errors: dict[str, list[str]] = {}
        self.checked: list[tuple[str, dict]] = []
        for key, value in values.items():
            setattr(self, key, value)
    
    def has_errors(self, attribute: str) -> bool:
        return bool(self.errors.get(attribute))
    
    def add_error(self, attribute: str, message: str) -> None:
        self.errors.setdefault(attribute, []).append(message)
    
    def get_attribute_label(self, attribute: str) -> str:
        return self.labels.get(attribute, attribute.replace("_", " ").title())
    
    def check_password_strength(self, attribute: str, params: dict) -> None:
        """Inline validator: password must be at least min_length long."""
        self.checked.append((attribute, params))
        value = getattr(self, attribute) or ""
        if len(value) < params.get("min_length", 8):
            self.add_error(attribute, "Password is too weak.")
    
    def client_password_strength(self, attribute: str, params: dict) -> str:
        return f"if (value.length < {params.get('min_length', 8)}) messages.push('weak');"


def sample_rules() -> list[tuple]:
    """Create a rule list as a hosting model would declare it."""
    return [
        ("name, email", "required", {"on": "insert"}),
        ("email", "email", {}),
        ("password", "check_password_strength", {"min_length": 10, "except": "import"}),
        ("age", "numerical", {"integer_only": True, "min": 18}),
    ]
