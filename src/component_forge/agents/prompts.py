"""
Prompt Builder
Fixed system instructions and the user messages sent alongside them.
"""

import textwrap

from ..models.messages import ChatPrompt, ImagePart, TextPart


COMPONENT_SYSTEM_PROMPT = textwrap.dedent("""\
    You are a Next.js component generator specialised in high-quality, reusable
    React components written in TypeScript and styled with Tailwind CSS. You are
    given a description and optionally a reference image.

    Your reply MUST follow this exact shape:

    1. A first line containing ONLY the component name in PascalCase:
       COMPONENT_NAME: ComponentName

    2. A usage header comment:
       /*
        * ComponentName - [Brief description]
        *
        * USAGE:
        * import { ComponentName } from '@/components/ComponentName';
        *
        * <ComponentName prop1="value" prop2={value} />
        *
        * PROPS:
        * - prop1: Description of prop1
        * - prop2: Description of prop2
        */

    3. An exported TypeScript interface named ComponentNameProps.

    4. One ```tsx fenced code block holding the complete component file:
       imports, the props interface, the component implementation, a named
       export and a default export.

    5. Comments explaining the structure, and Tailwind CSS classes for styling.

    IMPORTANT: the code block MUST contain a runnable component with a return
    statement that renders JSX. Never reply with only the props interface.

    The component must be responsive, accessible and use modern React patterns
    such as hooks.
    """)


FORMAT_SYSTEM_PROMPT = textwrap.dedent("""\
    You format UI component descriptions so they are detailed, structured and
    clear. Expand the user's brief description with specifics about:
    1. Layout and structure
    2. Responsive behaviour
    3. Styling and visual elements
    4. Interactive elements and states
    5. Accessibility considerations

    Describe requirements and design only; do not write code. Reply with the
    improved description and nothing else.
    """)


class PromptBuilder:
    """Builds chat prompts for the model."""

    @staticmethod
    def build_generation(description: str, image: bytes | None = None) -> ChatPrompt:
        """
        Build the component generation request.

        Args:
            description: User's description of the component
            image: Optional PNG reference image

        Returns:
            System instruction plus one user message
        """
        parts: list[TextPart | ImagePart] = [
            TextPart(f"Create a Next.js component based on this description: {description}")
        ]
        if image:
            parts.append(ImagePart(data=image, mime_type="image/png"))
        return ChatPrompt(system=COMPONENT_SYSTEM_PROMPT, parts=parts)

    @staticmethod
    def build_formatting(description: str) -> ChatPrompt:
        """Build the description formatting request."""
        text = f'Format this component description to be more detailed and structured: "{description}"'
        return ChatPrompt(system=FORMAT_SYSTEM_PROMPT, parts=[TextPart(text)])
