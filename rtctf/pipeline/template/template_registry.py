"""Template registry: one RTCTF template set (Result/Task/Context/Criteria/Format) per language."""

from rtctf.models.enums import Domain, Intent, Language
from rtctf.pipeline.template.methodology_template import PromptSlot, SlotLayout, TemplateSet

_EN = TemplateSet(
    language=Language.EN,
    layout=(
        SlotLayout(PromptSlot.TITLE, "OPTIMIZED PROMPT - RTCTF METHODOLOGY (Result, Task, Context, Criteria, Format)"),
        SlotLayout(PromptSlot.RESULT, "RESULT:"),
        SlotLayout(PromptSlot.TASK, "TASK:"),
        SlotLayout(PromptSlot.CONTEXT, "CONTEXT:"),
        SlotLayout(PromptSlot.CRITERIA, "CRITERIA:"),
        SlotLayout(PromptSlot.FORMAT, "FORMAT:"),
        SlotLayout(PromptSlot.SEPARATOR, "---"),
        SlotLayout(PromptSlot.FINAL_PROMPT, "FINAL PROMPT:"),
    ),
    results={
        Intent.CREATION: (
            "Create a complete, original and ready-to-use deliverable for what is requested, "
            "with professional quality and practical applicability."
        ),
        Intent.ANALYSIS: (
            "Deliver a clear analysis with well-founded insights, key findings and "
            "actionable recommendations."
        ),
        Intent.EXPLANATION: (
            "Provide a clear, didactic explanation that builds understanding step by step, "
            "from the fundamentals to practical application."
        ),
        Intent.PLANNING: (
            "Produce a structured, actionable plan with defined stages, priorities, "
            "timelines and success indicators."
        ),
        Intent.DEFAULT: (
            "Obtain a complete and well-structured answer to the request, with professional "
            "quality and practical applicability."
        ),
    },
    formats={
        Intent.CREATION: (
            "Deliver the final content ready to use:\n"
            "1. Short overview of the approach\n"
            "2. The complete deliverable, organized in clear sections\n"
            "3. Suggestions for adaptation or next iterations"
        ),
        Intent.ANALYSIS: (
            "Structure the analysis as follows:\n"
            "1. Executive summary\n"
            "2. Detailed findings with supporting evidence\n"
            "3. Risks and opportunities\n"
            "4. Prioritized recommendations"
        ),
        Intent.EXPLANATION: (
            "Structure the explanation progressively:\n"
            "1. Simple definition of the concept\n"
            "2. How it works, step by step\n"
            "3. Practical examples or analogies\n"
            "4. Summary of the key points"
        ),
        Intent.PLANNING: (
            "Present the plan as follows:\n"
            "1. Objectives and scope\n"
            "2. Stages with actions, owners and deadlines\n"
            "3. Required resources\n"
            "4. Metrics to track progress"
        ),
        Intent.DEFAULT: (
            "Structure your response in an organized, professional way:\n"
            "1. Introduction and context of the topic\n"
            "2. Detailed development of the main content\n"
            "3. Practical conclusions and/or recommended next steps\n"
            "4. Where applicable, relevant examples or references"
        ),
    },
    contexts={
        Domain.BUSINESS: (
            "This request belongs to a business context: consider market dynamics, the target "
            "audience, competitive positioning, return on investment and measurable results."
        ),
        Domain.TECH: (
            "This request belongs to a technical context: consider best practices, "
            "maintainability, performance, security and the current state of the relevant "
            "technologies."
        ),
        Domain.EDUCATION: (
            "This request belongs to an educational context: consider the learner's level, "
            "progressive difficulty, concrete examples and ways to check understanding."
        ),
    },
    default_context=(
        "This request requires attention to detail, application of best practices and "
        "consideration of the nuances of the subject. Take into account practical "
        "applicability and the current relevance of the topic."
    ),
    base_criteria=(
        "Be precise and objective",
        "Use clear and professional language",
        "Rely on reliable and up-to-date information",
        "Keep the focus on the main objective",
        "Consider different perspectives when relevant",
        "Provide practical examples when applicable",
    ),
    domain_criteria={
        Domain.BUSINESS: (
            "Tie recommendations to business goals and measurable metrics",
            "Take budget and resource constraints into account",
        ),
        Domain.TECH: (
            "Include code or technical examples where useful",
            "Point out trade-offs, limitations and edge cases",
        ),
        Domain.EDUCATION: (
            "Adapt the vocabulary to the audience's level",
            "Include exercises or questions that reinforce learning",
        ),
    },
    closing=(
        "Please provide a comprehensive, well-structured response. Organize the content "
        "logically, use clear and professional language, and include practical examples when "
        "relevant. Make sure to cover all important aspects of the topic and finish with "
        "actionable insights or recommended next steps."
    ),
)

_PT = TemplateSet(
    language=Language.PT,
    layout=(
        SlotLayout(PromptSlot.TITLE, "PROMPT OTIMIZADO - METODOLOGIA RTCTF (Resultado, Tarefa, Contexto, Critérios, Formato)"),
        SlotLayout(PromptSlot.RESULT, "RESULTADO:"),
        SlotLayout(PromptSlot.TASK, "TAREFA:"),
        SlotLayout(PromptSlot.CONTEXT, "CONTEXTO:"),
        SlotLayout(PromptSlot.CRITERIA, "CRITÉRIOS:"),
        SlotLayout(PromptSlot.FORMAT, "FORMATO:"),
        SlotLayout(PromptSlot.SEPARATOR, "---"),
        SlotLayout(PromptSlot.FINAL_PROMPT, "PROMPT FINAL:"),
    ),
    results={
        Intent.CREATION: (
            "Criar um entregável completo, original e pronto para uso para o que foi "
            "solicitado, com qualidade profissional e aplicabilidade prática."
        ),
        Intent.ANALYSIS: (
            "Entregar uma análise clara, com insights bem fundamentados, principais "
            "descobertas e recomendações acionáveis."
        ),
        Intent.EXPLANATION: (
            "Fornecer uma explicação clara e didática, que construa o entendimento passo a "
            "passo, dos fundamentos à aplicação prática."
        ),
        Intent.PLANNING: (
            "Produzir um plano estruturado e acionável, com etapas definidas, prioridades, "
            "prazos e indicadores de sucesso."
        ),
        Intent.DEFAULT: (
            "Obter uma resposta completa e estruturada sobre o que foi solicitado, com "
            "qualidade profissional e aplicabilidade prática."
        ),
    },
    formats={
        Intent.CREATION: (
            "Entregue o conteúdo final pronto para uso:\n"
            "1. Breve visão geral da abordagem\n"
            "2. O entregável completo, organizado em seções claras\n"
            "3. Sugestões de adaptação ou próximas iterações"
        ),
        Intent.ANALYSIS: (
            "Estruture a análise da seguinte forma:\n"
            "1. Resumo executivo\n"
            "2. Descobertas detalhadas com evidências\n"
            "3. Riscos e oportunidades\n"
            "4. Recomendações priorizadas"
        ),
        Intent.EXPLANATION: (
            "Estruture a explicação de forma progressiva:\n"
            "1. Definição simples do conceito\n"
            "2. Como funciona, passo a passo\n"
            "3. Exemplos práticos ou analogias\n"
            "4. Resumo dos pontos principais"
        ),
        Intent.PLANNING: (
            "Apresente o plano da seguinte forma:\n"
            "1. Objetivos e escopo\n"
            "2. Etapas com ações, responsáveis e prazos\n"
            "3. Recursos necessários\n"
            "4. Métricas para acompanhar o progresso"
        ),
        Intent.DEFAULT: (
            "Estruture sua resposta de forma organizada e profissional:\n"
            "1. Introdução/contextualização do tema\n"
            "2. Desenvolvimento detalhado do conteúdo principal\n"
            "3. Conclusões práticas e/ou próximos passos recomendados\n"
            "4. Se aplicável, exemplos ou referências relevantes"
        ),
    },
    contexts={
        Domain.BUSINESS: (
            "Este pedido pertence a um contexto de negócios: considere a dinâmica de mercado, "
            "o público-alvo, o posicionamento competitivo, o retorno sobre o investimento e "
            "resultados mensuráveis."
        ),
        Domain.TECH: (
            "Este pedido pertence a um contexto técnico: considere boas práticas, "
            "manutenibilidade, desempenho, segurança e o estado atual das tecnologias "
            "envolvidas."
        ),
        Domain.EDUCATION: (
            "Este pedido pertence a um contexto educacional: considere o nível de quem "
            "aprende, a dificuldade progressiva, exemplos concretos e formas de verificar o "
            "entendimento."
        ),
    },
    default_context=(
        "Este é um pedido que requer atenção aos detalhes, aplicação de melhores práticas e "
        "consideração das nuances do tema. Leve em conta a aplicabilidade prática e a "
        "relevância atual do assunto."
    ),
    base_criteria=(
        "Seja preciso e objetivo na resposta",
        "Use linguagem clara e profissional",
        "Baseie-se em informações confiáveis e atualizadas",
        "Mantenha foco no objetivo principal",
        "Considere diferentes perspectivas quando relevante",
        "Forneça exemplos práticos quando aplicável",
    ),
    domain_criteria={
        Domain.BUSINESS: (
            "Relacione as recomendações a objetivos de negócio e métricas mensuráveis",
            "Leve em conta restrições de orçamento e recursos",
        ),
        Domain.TECH: (
            "Inclua código ou exemplos técnicos quando útil",
            "Aponte trade-offs, limitações e casos extremos",
        ),
        Domain.EDUCATION: (
            "Adapte o vocabulário ao nível do público",
            "Inclua exercícios ou perguntas que reforcem o aprendizado",
        ),
    },
    closing=(
        "Por favor, forneça uma resposta abrangente e bem estruturada. Organize o conteúdo de "
        "forma lógica, use linguagem clara e profissional, e inclua exemplos práticos quando "
        "relevante. Certifique-se de abordar todos os aspectos importantes do tema e conclua "
        "com insights acionáveis ou próximos passos recomendados."
    ),
)


class TemplateRegistry:
    def __init__(self) -> None:
        self._template_sets: dict[Language, TemplateSet] = {}
        self._register_all()

    def _register_all(self) -> None:
        self._register(_EN)
        self._register(_PT)

    def _register(self, template_set: TemplateSet) -> None:
        self._template_sets[template_set.language] = template_set

    def get(self, language: Language) -> TemplateSet:
        return self._template_sets.get(language, self.get_default())

    def get_default(self) -> TemplateSet:
        return self._template_sets[Language.EN]
