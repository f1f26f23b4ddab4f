"""
Unit tests for data models.
"""
import pytest

from revealsync.models import (
    UNBOUND,
    Bound,
    ConfigurationChangeEvent,
    CursorPosition,
    Selection,
    Slide,
    SlidePosition,
    TextDocument,
    unwrap,
)


class TestSlidePosition:
    """Tests for SlidePosition dataclass."""
    
    def test_defaults(self):
        position = SlidePosition()
        
        assert position.horizontal == 0
        assert position.vertical == 0
    
    def test_move_to(self):
        position = SlidePosition()
        position.move_to(3, 2)
        
        assert (position.horizontal, position.vertical) == (3, 2)
        assert position.as_fragment() == "3/2"
    
    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            SlidePosition(-1, 0)
        
        position = SlidePosition()
        with pytest.raises(ValueError):
            position.move_to(0, -1)
        assert position == SlidePosition(0, 0)


class TestSlide:
    """Tests for Slide model."""
    
    def test_label_prefers_title(self):
        slide = Slide(index=0, title="Intro", start_line=0, end_line=2)
        
        assert slide.label == "Intro"
    
    def test_label_fallback(self):
        assert Slide(index=1, start_line=0, end_line=0).label == "Slide 2"
        assert Slide(index=1, vertical_index=2, start_line=0, end_line=0).label == "Slide 2.2"


class TestBinding:
    """Tests for the Bound / Unbound wrappers."""
    
    def test_unbound_is_falsy(self):
        assert not UNBOUND
        assert unwrap(UNBOUND) is None
    
    def test_bound_unwraps(self):
        value = object()
        
        assert unwrap(Bound(value)) is value


class TestEditorModels:
    """Tests for the editor host model."""
    
    def test_caret_collapses_selection(self):
        selection = Selection.caret(4, 2)
        
        assert selection.anchor == selection.active == CursorPosition(4, 2)
    
    def test_configuration_event_sections(self):
        event = ConfigurationChangeEvent(frozenset({"revealjs.theme"}))
        
        assert event.affects_configuration("revealjs")
        assert not event.affects_configuration("reveal")
        assert not ConfigurationChangeEvent().affects_configuration("revealjs")
    
    def test_document_update_bumps_version(self):
        document = TextDocument(file_name="deck.md", language_id="markdown", text="a")
        document.update("b")
        
        assert document.get_text() == "b"
        assert document.version == 2
    
    def test_from_path_guesses_language(self, tmp_path):
        path = tmp_path / "slides.md"
        path.write_text("# Hi", encoding="utf-8")
        
        document = TextDocument.from_path(path)
        
        assert document.language_id == "markdown"
        assert document.text == "# Hi"
        assert document.dirname == str(tmp_path.resolve())
