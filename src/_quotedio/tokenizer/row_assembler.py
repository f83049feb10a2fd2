from _quotedio.tokenizer.category import CharacterCategory


def assemble_row(chars, categories, signals):
    """
    Reconstruct the columns of one row from its characters and their
    categories (see ClassificationBuffer).

    >>> from _quotedio.signals import CSV
    >>> Cat = CharacterCategory
    >>> assemble_row(["a", ",", "b"], [Cat.CHAR, Cat.DELIMITER, Cat.CHAR], CSV)
    ['a', 'b']

    :param chars: The characters of the row.
    :param categories: The category of each character in chars.
    :param signals: The Signals used to classify the characters.
    :returns: List of column strings, always at least one (possibly empty).
    """
    if len(chars) != len(categories):
        raise ValueError(
            f"Got {len(chars)} characters but {len(categories)} categories"
        )

    columns = []
    column = []
    in_quotes = False

    for char, category in zip(chars, categories):
        if category == CharacterCategory.CHAR:
            column.append(char)
        elif category == CharacterCategory.DELIMITER:
            if in_quotes:
                column.append(signals.delimiter)
            else:
                columns.append("".join(column))
                column = []
        elif category == CharacterCategory.START_QUOTE:
            in_quotes = True
        elif category == CharacterCategory.END_QUOTE:
            in_quotes = False
        elif category == CharacterCategory.ESCAPED_QUOTE:
            column.append(signals.quote)
        elif category == CharacterCategory.NEWLINE:
            if in_quotes:
                column.append(signals.newline)
        elif category == CharacterCategory.NOOP:
            pass
        else:
            raise ValueError(f"Unexpected character category {category}")

    columns.append("".join(column))
    return columns
