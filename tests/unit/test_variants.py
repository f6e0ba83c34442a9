"""
Unit tests for variant classification
"""

from tailwind_cs_fixer.core.variants import (
    NO_BREAKPOINT,
    VariantClass,
    breakpoint_rank,
    classify,
    split_variants,
)


class TestSplitVariants:
    """Test splitting classes into chain and base utility"""

    def test_plain_class(self):
        """Test class without variants"""
        assert split_variants("flex") == ([], "flex")

    def test_variant_chain(self):
        """Test chain order is kept"""
        assert split_variants("dark:lg:hover:bg-gray-700") == (
            ["dark", "lg", "hover"],
            "bg-gray-700",
        )


class TestClassify:
    """Test variant class precedence"""

    def test_plain(self):
        """Test empty chain"""
        assert classify([]) == (VariantClass.PLAIN, 0)

    def test_state(self):
        """Test state variants"""
        assert classify(["hover"]) == (VariantClass.STATE, 0)
        assert classify(["group-hover"]) == (VariantClass.STATE, 0)

    def test_responsive(self):
        """Test breakpoints carry their rank"""
        assert classify(["sm"]) == (VariantClass.RESPONSIVE, 0)
        assert classify(["lg"]) == (VariantClass.RESPONSIVE, 2)
        assert classify(["2xl"]) == (VariantClass.RESPONSIVE, 4)

    def test_responsive_state(self):
        """Test responsive wins over state"""
        assert classify(["lg", "hover"]) == (VariantClass.RESPONSIVE, 2)

    def test_media(self):
        """Test dark variants"""
        assert classify(["dark"]) == (VariantClass.MEDIA, 0)
        assert classify(["dark", "hover"]) == (VariantClass.MEDIA_STATE, 0)
        assert classify(["dark", "md"]) == (VariantClass.MEDIA_RESPONSIVE, 1)
        assert classify(["dark", "lg", "hover"]) == (
            VariantClass.MEDIA_RESPONSIVE,
            2,
        )

    def test_unrecognized_variants_ignored(self):
        """Test unknown variants do not change the class"""
        assert classify(["print"]) == (VariantClass.PLAIN, 0)
        assert classify(["group-focus", "lg"]) == (VariantClass.RESPONSIVE, 2)

    def test_precedence(self):
        """Test the variant classes escalate"""
        assert (
            VariantClass.PLAIN
            < VariantClass.STATE
            < VariantClass.RESPONSIVE
            < VariantClass.MEDIA
            < VariantClass.MEDIA_STATE
            < VariantClass.MEDIA_RESPONSIVE
        )


class TestBreakpointRank:
    """Test breakpoint rank lookup"""

    def test_first_breakpoint_wins(self):
        """Test the first recognized breakpoint is used"""
        assert breakpoint_rank(["hover", "md", "lg"]) == 1

    def test_no_breakpoint(self):
        """Test chains without breakpoint"""
        assert breakpoint_rank(["hover"]) == NO_BREAKPOINT
