# usage: shallow phrase chunking over pre-tagged tokens
from nltk import RegexpParser
from nltk.chunk import tree2conlltags

# Stages run top to bottom; continuation lines add rules to the same stage.
DEFAULT_GRAMMAR = r"""
NP: {<DT|PRP\$>?<JJ.*>*<NN.*>+}
    {<PRP>}
PP: {<IN|TO>}
VP: {<MD>?<VB.*>+<RB.*>?}
"""


def chunk_tags(tokens, tags, grammar: str = DEFAULT_GRAMMAR):
    """
    Label tokens with IOB chunk tags (B-NP, I-NP, B-VP, B-PP, O).

    Raises:
        ValueError: when tokens and tags differ in length.
    """
    tokens, tags = list(tokens), list(tags)
    if len(tokens) != len(tags):
        raise ValueError(f"Got {len(tokens)} tokens but {len(tags)} tags")
    if not tokens:
        return []
    tree = RegexpParser(grammar).parse(list(zip(tokens, tags)))
    return [iob for _, _, iob in tree2conlltags(tree)]
