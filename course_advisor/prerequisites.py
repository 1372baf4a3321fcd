# === prerequisites.py ===
class PrerequisiteSet:
    """Distinct prerequisite course numbers seen while loading."""

    def __init__(self):
        self.numbers = set()

    def add(self, number):
        self.numbers.add(number)

    def update(self, numbers):
        for number in numbers:
            self.add(number)

    def clear(self):
        self.numbers = set()

    def __iter__(self):
        # sorted so a bad file always reports the same missing course
        return iter(sorted(self.numbers))

    def __len__(self):
        return len(self.numbers)

    def __contains__(self, number):
        return number in self.numbers

    def missing_from(self, tree):
        """Yield every prerequisite that is not a course in `tree`."""
        for number in self:
            if not tree.exists(number):
                yield number
