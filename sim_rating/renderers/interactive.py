"""Inert click-to-event script fragments.

The renderers only embed these strings. When a host document runs them,
clicking an element carrying ``data-rating-value`` dispatches a bubbling,
cancelable ``rating-change`` CustomEvent whose ``detail.rating`` is the
clicked star value (1-5).
"""

HTML_INTERACTIVE_SCRIPT = """
<script>
  (function() {
    const dispatchRatingEvent = (element, value) => {
      element.dispatchEvent(new CustomEvent('rating-change', {
        detail: { rating: value },
        bubbles: true,
        cancelable: true
      }));
    };

    document.querySelectorAll('.sim-rating').forEach(ratingEl => {
      ratingEl.addEventListener('click', (e) => {
        const star = e.target.closest('[data-rating-value]');
        if (star) {
          const value = parseInt(star.dataset.ratingValue, 10);
          dispatchRatingEvent(ratingEl, value);
        }
      });
    });
  })();
</script>
"""

SVG_INTERACTIVE_SCRIPT = """
<script>
  document.querySelectorAll('.sim-rating-svg').forEach(svg => {
    svg.addEventListener('click', (e) => {
      const star = e.target.closest('[data-rating-value]');
      if (star) {
        svg.dispatchEvent(new CustomEvent('rating-change', {
          detail: { rating: parseInt(star.getAttribute('data-rating-value'), 10) },
          bubbles: true,
          cancelable: true
        }));
      }
    });
  });
</script>
"""


def html_interactive_script() -> str:
    """Script fragment for markup renders (binds to .sim-rating)."""
    return HTML_INTERACTIVE_SCRIPT


def svg_interactive_script() -> str:
    """Script fragment for svg renders (binds to .sim-rating-svg)."""
    return SVG_INTERACTIVE_SCRIPT
