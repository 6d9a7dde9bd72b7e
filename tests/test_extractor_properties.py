"""Property-based tests for metadata extraction."""

import string

from hypothesis import given
from hypothesis import strategies as st

from feed_builder.extractor import TRUNCATION_MARKER, extract_metadata

document_text = st.text(
    alphabet=st.one_of(
        st.characters(blacklist_categories=("Cs", "Cc")),
        st.sampled_from(list("\n\n\n #*_`[]()!>-")),
    ),
    max_size=1500,
)


class TestExtractorProperties:
    """Property-based tests for extract_metadata."""

    @given(document_text, st.integers(min_value=1, max_value=500))
    def test_description_respects_budget(self, content, budget):
        """
        For any document and budget, the description body never exceeds the
        budget and always ends with the truncation marker.
        """
        info = extract_metadata(content, budget)

        assert info.description.endswith(TRUNCATION_MARKER)
        assert len(info.description) - len(TRUNCATION_MARKER) <= budget

    @given(document_text)
    def test_fields_are_single_line(self, content):
        """
        For any document, neither title nor description contains a newline.
        """
        info = extract_metadata(content, 420)

        assert "\n" not in info.title
        assert "\n" not in info.description

    @given(
        st.lists(
            st.text(alphabet=string.ascii_letters, min_size=1, max_size=10),
            min_size=1,
            max_size=6,
        )
    )
    def test_single_line_documents(self, words):
        """
        For any single plain line, the title is the line and the description
        is the marker alone.
        """
        line = " ".join(words)
        info = extract_metadata(line, 420)

        assert info.title == line
        assert info.description == TRUNCATION_MARKER
