"""voxtral

Client core for the Voxtral Memos app: upload recordings to the Mistral
transcription API and run prompt templates over the transcripts.

    from voxtral.mistral import MistralClient
"""

__version__ = "0.1.0"
