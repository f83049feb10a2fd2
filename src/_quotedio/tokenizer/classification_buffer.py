from _quotedio.tokenizer.category import CharacterCategory


class ClassificationBuffer:
    """
    The characters of the current row together with the category of each
    character. Characters are appended as CharacterCategory.CHAR and the
    categories are revised once a token has been completed, so both lists
    always have the same length.
    """

    def __init__(self):
        self.chars = []
        self.categories = []

    def __len__(self):
        return len(self.chars)

    def append(self, char):
        self.chars.append(char)
        self.categories.append(CharacterCategory.CHAR)

    def category_at(self, index):
        """
        :returns: The category at the given index, or None if the index is
            out of range (negative indices are considered out of range).
        """
        if 0 <= index < len(self.categories):
            return self.categories[index]
        return None

    def revise(self, category, length):
        """
        Revise the categories of the last length characters: the first of them
        gets the given category and the rest become NOOP.
        """
        if length > len(self.categories):
            raise ValueError(
                f"Cannot revise {length} characters of a buffer of "
                f"length {len(self.categories)}"
            )
        start = len(self.categories) - length
        self.categories[start] = category
        self.categories[start + 1 :] = [CharacterCategory.NOOP] * (length - 1)

    def in_quotes(self):
        """
        Whether the end of the buffer is inside a quoted column, ie. a
        START_QUOTE occurs after the last END_QUOTE.
        """
        for category in reversed(self.categories):
            if category == CharacterCategory.END_QUOTE:
                return False
            if category == CharacterCategory.START_QUOTE:
                return True
        return False

    def clear(self):
        self.chars.clear()
        self.categories.clear()
