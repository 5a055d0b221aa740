"""Pytest configuration and fixtures."""

import pytest

from entrez_records.config import Settings

PUBMED_ARTICLE_SET_XML = """\
<?xml version="1.0" ?>
<!DOCTYPE PubmedArticleSet PUBLIC "-//NLM//DTD PubMedArticle, 1st January 2019//EN" "https://dtd.nlm.nih.gov/ncbi/pubmed/out/pubmed_190101.dtd">
<PubmedArticleSet>
  <PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM">
      <PMID Version="1">33246200</PMID>
      <DateRevised>
        <Year>2021</Year>
        <Month>03</Month>
        <Day>02</Day>
      </DateRevised>
      <Article PubModel="Print-Electronic">
        <Journal>
          <ISSN IssnType="Electronic">1873-2488</ISSN>
          <JournalIssue CitedMedium="Internet">
            <Volume>49</Volume>
            <Issue>2</Issue>
            <PubDate>
              <Year>2021</Year>
              <Month>Feb</Month>
            </PubDate>
          </JournalIssue>
          <Title>Pregnancy hypertension</Title>
          <ISOAbbreviation>Pregnancy Hypertens</ISOAbbreviation>
        </Journal>
        <ArticleTitle>Magnesium sulfate in severe pre-eclampsia.</ArticleTitle>
        <ELocationID EIdType="doi" ValidYN="Y">10.1016/j.preghy.2020.11.003</ELocationID>
        <Abstract>
          <AbstractText Label="BACKGROUND" NlmCategory="BACKGROUND">Eclampsia remains a leading cause of maternal death.</AbstractText>
          <AbstractText Label="RESULTS" NlmCategory="RESULTS">Serum Mg<sup>2+</sup> rose in <i>all</i> women.</AbstractText>
          <CopyrightInformation>Copyright 2020. Published by Elsevier B.V.</CopyrightInformation>
        </Abstract>
        <AuthorList CompleteYN="Y">
          <Author ValidYN="Y">
            <LastName>Okafor</LastName>
            <ForeName>Ada</ForeName>
            <Initials>A</Initials>
          </Author>
          <Author ValidYN="Y">
            <CollectiveName>Eclampsia Trial Group</CollectiveName>
          </Author>
        </AuthorList>
        <Language>eng</Language>
        <PublicationTypeList>
          <PublicationType UI="D016428">Journal Article</PublicationType>
          <PublicationType UI="D016449">Randomized Controlled Trial</PublicationType>
        </PublicationTypeList>
      </Article>
      <MedlineJournalInfo>
        <Country>Netherlands</Country>
        <MedlineTA>Pregnancy Hypertens</MedlineTA>
        <NlmUniqueID>101552483</NlmUniqueID>
        <ISSNLinking>2210-7789</ISSNLinking>
      </MedlineJournalInfo>
      <MeshHeadingList>
        <MeshHeading>
          <DescriptorName UI="D004461" MajorTopicYN="Y">Eclampsia</DescriptorName>
          <QualifierName UI="Q000188" MajorTopicYN="N">drug therapy</QualifierName>
          <QualifierName UI="Q000517" MajorTopicYN="Y">prevention &amp; control</QualifierName>
        </MeshHeading>
      </MeshHeadingList>
      <KeywordList Owner="NOTNLM">
        <Keyword MajorTopicYN="N">Magnesium sulfate</Keyword>
        <Keyword MajorTopicYN="N">Pre-eclampsia</Keyword>
      </KeywordList>
    </MedlineCitation>
    <PubmedData>
      <History>
        <PubMedPubDate PubStatus="received">
          <Year>2020</Year>
          <Month>7</Month>
          <Day>14</Day>
        </PubMedPubDate>
        <PubMedPubDate PubStatus="accepted">
          <Year>2020</Year>
          <Month>11</Month>
          <Day>9</Day>
        </PubMedPubDate>
        <PubMedPubDate PubStatus="pubmed">
          <Year>2020</Year>
          <Month>11</Month>
          <Day>28</Day>
        </PubMedPubDate>
      </History>
      <PublicationStatus>ppublish</PublicationStatus>
      <ArticleIdList>
        <ArticleId IdType="pubmed">33246200</ArticleId>
        <ArticleId IdType="doi">10.1016/j.preghy.2020.11.003</ArticleId>
        <ArticleId IdType="pii">S2210-7789(20)30512-6</ArticleId>
      </ArticleIdList>
      <ReferenceList>
        <Reference>
          <Citation>Duley L. The global impact of pre-eclampsia and eclampsia.</Citation>
          <ArticleIdList>
            <ArticleId IdType="pubmed">19523578</ArticleId>
          </ArticleIdList>
        </Reference>
        <Reference>
          <Citation>Unindexed conference abstract.</Citation>
        </Reference>
      </ReferenceList>
    </PubmedData>
  </PubmedArticle>
  <PubmedArticle>
    <MedlineCitation Status="PubMed-not-MEDLINE" Owner="NLM">
      <PMID Version="1">22222222</PMID>
      <Article PubModel="Electronic">
        <ArticleTitle>A short communication.</ArticleTitle>
        <Abstract>
          <AbstractText>Single unlabelled paragraph.</AbstractText>
        </Abstract>
      </Article>
    </MedlineCitation>
  </PubmedArticle>
</PubmedArticleSet>
"""

ESEARCH_RESULT_XML = """\
<?xml version="1.0" encoding="UTF-8" ?>
<!DOCTYPE eSearchResult PUBLIC "-//NLM//DTD esearch 20060628//EN" "https://eutils.ncbi.nlm.nih.gov/eutils/dtd/20060628/esearch.dtd">
<eSearchResult>
  <Count>1873</Count>
  <RetMax>3</RetMax>
  <RetStart>0</RetStart>
  <QueryKey>1</QueryKey>
  <WebEnv>MCID_65f1a2b3c4d5e6f7a8b9c0d1</WebEnv>
  <IdList>
    <Id>33246200</Id>
    <Id>33190042</Id>
    <Id>33012345</Id>
  </IdList>
  <TranslationSet>
    <Translation>
      <From>eclampsia</From>
      <To>"eclampsia"[MeSH Terms] OR "eclampsia"[All Fields]</To>
    </Translation>
  </TranslationSet>
  <QueryTranslation>"eclampsia"[MeSH Terms] OR "eclampsia"[All Fields]</QueryTranslation>
</eSearchResult>
"""


@pytest.fixture
def pubmed_xml() -> str:
    """EFetch response with two articles; the first is fully populated."""
    return PUBMED_ARTICLE_SET_XML


@pytest.fixture
def esearch_xml() -> str:
    """ESearch response for 'eclampsia' run with usehistory=y."""
    return ESEARCH_RESULT_XML


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore the environment and any .env file."""
    return Settings(
        _env_file=None,
        ncbi_api_key="",
        ncbi_email="dev@example.org",
        ncbi_tool="entrez-records-tests",
        requests_per_second=1000.0,
    )
